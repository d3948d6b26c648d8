import argparse
import logging
import sys
from datetime import timedelta

from talent_registry.adapters.sqlite.migrator import SQLiteMigrator
from talent_registry.api.auth_utils import create_access_token
from talent_registry.app_shell.config import Settings, build_talent_store
from talent_registry.components.registry import (
    GetProfileInput,
    TalentRegistry,
    run_fetch_record,
    run_registration_status,
)
from talent_registry.rules.loader import load_rules
from talent_registry.rules.models import Rules

logger = logging.getLogger("cli")


def get_rules(settings: Settings) -> Rules:
    if not settings.rules_path.exists():
        logger.error(f"Rules file {settings.rules_path} not found.")
        sys.exit(1)
    return load_rules(settings.rules_path)


def get_registry(settings: Settings, rules: Rules) -> TalentRegistry:
    return TalentRegistry(
        store=build_talent_store(settings, rules),
        confirmations=rules.registry.confirmations.model_dump(),
    )


def handle_migrate(settings: Settings, rules: Rules, args: argparse.Namespace) -> None:
    if rules.storage.backend != "sqlite":
        print(f"Storage backend '{rules.storage.backend}' has no migrations.")
        return
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    migrator = SQLiteMigrator(settings.db_path(rules))
    if args.dry_run:
        pending = migrator.pending_migrations()
        print(f"Pending: {', '.join(pending) if pending else 'none'}")
        return
    applied = migrator.run_migrations()
    print(f"Applied {len(applied)} migration(s).")


def handle_issue_token(rules: Rules, args: argparse.Namespace) -> None:
    minutes = args.minutes or rules.auth.token_ttl_minutes
    token = create_access_token({"sub": args.identity}, expires_delta=timedelta(minutes=minutes))
    print(token)


def handle_show(service: TalentRegistry, args: argparse.Namespace) -> None:
    result = run_fetch_record(GetProfileInput(identity=args.identity), service)
    if not result.success:
        assert result.error is not None
        print(f"Error {int(result.error.code)} ({result.error.name}): {result.error.message}")
        sys.exit(1)

    record = result.value
    print(f"Identifier: {record.personal_identifier}")
    print(f"Region:     {record.base_region}")
    print(f"Expertise:  {', '.join(record.expertise_areas)}")
    print(f"Capacity:   {record.weekly_capacity} h/week")


def handle_status(service: TalentRegistry, args: argparse.Namespace) -> None:
    result = run_registration_status(GetProfileInput(identity=args.identity), service)
    print(result.value)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Talent Registry CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # migrate
    migrate_parser = subparsers.add_parser("migrate", help="Apply pending database migrations")
    migrate_parser.add_argument(
        "--dry-run", action="store_true", help="List pending migrations without applying them"
    )

    # issue-token
    token_parser = subparsers.add_parser("issue-token", help="Issue a dev bearer token")
    token_parser.add_argument("identity", help="Caller identity (token subject)")
    token_parser.add_argument("--minutes", type=int, help="Token lifetime in minutes")

    # show
    show_parser = subparsers.add_parser("show", help="Print a registered profile")
    show_parser.add_argument("identity")

    # status
    status_parser = subparsers.add_parser("status", help="Print registration status")
    status_parser.add_argument("identity")

    args = parser.parse_args(argv)

    settings = Settings()
    rules = get_rules(settings)

    if args.command == "migrate":
        handle_migrate(settings, rules, args)
    elif args.command == "issue-token":
        handle_issue_token(rules, args)
    elif args.command == "show":
        handle_show(get_registry(settings, rules), args)
    elif args.command == "status":
        handle_status(get_registry(settings, rules), args)


if __name__ == "__main__":
    main()
