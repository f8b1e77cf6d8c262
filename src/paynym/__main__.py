"""Checks payment code addresses: python -m paynym ADDRESS..."""
import argparse
import logging
import sys

from embit.networks import NETWORKS

from .bip47 import is_payment_code_address


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="paynym", description="Check payment code addresses"
    )
    parser.add_argument("addresses", nargs="+", metavar="ADDRESS")
    parser.add_argument(
        "--network",
        choices=sorted(NETWORKS.keys()),
        default="main",
        help="Network to validate the notification key against (default: main)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log why addresses are rejected"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    network = NETWORKS[args.network]
    all_valid = True
    for address in args.addresses:
        if is_payment_code_address(address, network):
            print("valid")
        else:
            print("invalid")
            all_valid = False
    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
