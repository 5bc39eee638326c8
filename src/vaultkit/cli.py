"""
Vaultkit command line interface.

Usage:
    vaultkit get KEY
    vaultkit put KEY VALUE
    vaultkit destroy KEY
    vaultkit health

Connection settings are read from the environment (VAULT_ADDR, VAULT_TOKEN, ...).

Exit codes: 0 on success, 1 on failure or an unhealthy vault, 2 if the secret
does not exist.
"""
import argparse
import logging
import sys
from typing import List, Optional

from vaultkit.secrets import (
    ConfigurationError,
    SecretNotFoundError,
    VaultClient,
    VaultClientConfig,
    VaultError,
    VaultHealthCheck,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vaultkit", description="HashiCorp Vault KV v2 client")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    get_parser = subparsers.add_parser("get", help="Read a secret")
    get_parser.add_argument("key")

    put_parser = subparsers.add_parser("put", help="Create or update a secret")
    put_parser.add_argument("key")
    put_parser.add_argument("value")

    destroy_parser = subparsers.add_parser("destroy", help="Delete a secret and all its versions")
    destroy_parser.add_argument("key")

    subparsers.add_parser("health", help="Check Vault health")
    return parser


def run(args: argparse.Namespace, client: VaultClient) -> int:
    if args.command == "get":
        print(client.get_secret(args.key).value)
    elif args.command == "put":
        result = client.set_secret(args.key, args.value)
        print(f"Stored {args.key} (version {result.version})")
    elif args.command == "destroy":
        client.destroy_secret(args.key)
        print(f"Destroyed {args.key}")
    elif args.command == "health":
        check = VaultHealthCheck(client).check()
        if not check.is_healthy:
            print(check.failure_message)
            return EXIT_FAILURE
        print("Vault is initialized, unsealed and active")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = VaultClientConfig.from_env()
    except ConfigurationError as e:
        logger.error(f"Invalid Vault configuration: {e}")
        return EXIT_FAILURE

    with VaultClient(config) as client:
        try:
            return run(args, client)
        except SecretNotFoundError as e:
            print(str(e), file=sys.stderr)
            return EXIT_NOT_FOUND
        except (VaultError, ValueError) as e:
            logger.error(str(e))
            return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
