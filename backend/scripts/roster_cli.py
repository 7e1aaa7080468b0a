#!/usr/bin/env python3
"""Command-line access to the employee store.

Run from the backend/ directory (or after installing the package):

    python3 scripts/roster_cli.py export --format csv --status active --output employees.csv
    python3 scripts/roster_cli.py stats
    python3 scripts/roster_cli.py import backup.json
    python3 scripts/roster_cli.py reset
    python3 scripts/roster_cli.py supervisors --exclude emp_3
    python3 scripts/roster_cli.py films --search skywalker

The store location and storage key come from Settings (EMPLOYEE_STORE_PATH,
EMPLOYEE_STORAGE_KEY), overridable with --store.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from roster.core.config import Settings, settings  # noqa: E402
from roster.models.employee import CONTRACT_TYPES, EMPLOYEE_STATUSES  # noqa: E402
from roster.models.query import FilterSpec  # noqa: E402
from roster.services.employee_directory import EmployeeDirectory, open_directory  # noqa: E402
from roster.services.film_catalog import film_catalog_service, search_films  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage the local employee store")
    parser.add_argument("--store", help="Path of the JSON store file (default: EMPLOYEE_STORE_PATH)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (DEBUG) logging")

    sub = parser.add_subparsers(dest="command", required=True)

    export = sub.add_parser("export", help="Export employees as CSV or JSON")
    export.add_argument("--format", choices=("csv", "json"), default="csv")
    export.add_argument("--output", help="Write to this file instead of stdout")
    export.add_argument("--department", help="Department id filter")
    export.add_argument("--role", help="Role id filter")
    export.add_argument("--status", choices=EMPLOYEE_STATUSES)
    export.add_argument("--contract-type", choices=CONTRACT_TYPES)
    export.add_argument("--search", help="Free-text search on name, email and id")
    export.add_argument("--sort-by", choices=("name", "hireDate", "department", "role"))
    export.add_argument("--desc", action="store_true", help="Sort descending")

    sub.add_parser("stats", help="Print dashboard statistics as JSON")

    import_cmd = sub.add_parser("import", help="Replace all employees with a JSON export")
    import_cmd.add_argument("path")

    supervisors = sub.add_parser("supervisors", help="List employees who can be assigned as supervisor")
    supervisors.add_argument("--exclude", help="Employee id to leave out (the one being edited)")

    sub.add_parser("reset", help="Restore the demo employees")
    sub.add_parser("clear", help="Delete all employees")

    films = sub.add_parser("films", help="List films from the public catalogue")
    films.add_argument("--search", help="Filter by title, director, crawl text or episode")

    return parser.parse_args(argv)


def _filter_spec(args: argparse.Namespace) -> FilterSpec:
    return FilterSpec(
        department=args.department,
        role=args.role,
        status=args.status,
        contract_type=args.contract_type,
        search_term=args.search,
        sort_by=args.sort_by,
        sort_order="desc" if args.desc else "asc",
    )


def _write(text: str, output: str | None) -> None:
    if output:
        with open(output, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        logger.info("Wrote %s", output)
    else:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")


def run_export(directory: EmployeeDirectory, args: argparse.Namespace) -> int:
    directory.filters = _filter_spec(args)
    if args.format == "json":
        text = directory.export_json(filtered=True)
    else:
        text = directory.export_csv(filtered=True)
    _write(text, args.output)
    return 0


def run_stats(directory: EmployeeDirectory) -> int:
    stats = directory.statistics()
    payload = stats.model_dump(by_alias=True, exclude={"new_hire_records", "probation_records"})
    sys.stdout.write(json.dumps(payload, indent=2) + "\n")
    return 0


def run_supervisors(directory: EmployeeDirectory, exclude_id: str | None) -> int:
    for emp in directory.supervisors(exclude_id=exclude_id):
        sys.stdout.write(f"{emp.id}\t{emp.full_name}\n")
    return 0


def run_import(directory: EmployeeDirectory, path: str) -> int:
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except OSError as e:
        logger.error("Cannot read %s: %s", path, e)
        return 1

    if not directory.import_json(text):
        return 1
    logger.info("Imported %d employees from %s", len(directory.employees), path)
    return 0


async def run_films(config: Settings, term: str | None) -> int:
    film_catalog_service.configure(config)
    films = search_films(await film_catalog_service.fetch_films(), term)
    for film in films:
        sys.stdout.write(f"Episode {film.episode_id}: {film.title} ({film.release_date}) - {film.director}\n")
    if term and not films:
        logger.info('No films match "%s"', term)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    config = settings
    if args.store:
        config = settings.model_copy(update={"EMPLOYEE_STORE_PATH": args.store})

    if args.command == "films":
        return asyncio.run(run_films(config, args.search))

    directory = open_directory(config)
    if args.command == "export":
        return run_export(directory, args)
    if args.command == "stats":
        return run_stats(directory)
    if args.command == "import":
        return run_import(directory, args.path)
    if args.command == "supervisors":
        return run_supervisors(directory, args.exclude)
    if args.command == "reset":
        directory.reset_to_initial_data()
        logger.info("Restored %d demo employees", len(directory.employees))
        return 0
    if args.command == "clear":
        directory.clear_all_data()
        logger.info("All employees deleted")
        return 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
