"""Interactive command line for browsing an organization's folders.

Usage:
    folder-store [--org-id UUID] [--data-file PATH] [--mode dump|paginate]

Without --mode the user is asked to pick DUMP (every folder at once) or
PAGINATE (one page at a time, following page tokens until the last page).
"""

import argparse
import logging
import sys
from typing import Callable, Optional, List
from uuid import UUID

import yaml

from .config import get_settings
from .errors.problem_details import ProblemDetailException
from .models.folders import FetchFolderRequest, FetchFolderResponse
from .providers import FolderProvider, file_folder_provider
from .services.folders import fetch_folders_by_org_id

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def pretty_print(response: FetchFolderResponse, output: OutputFn = print) -> None:
    """Print a response as indented JSON."""
    output(response.model_dump_json(indent=2))


def fetch_and_print(
    request: FetchFolderRequest,
    provider: FolderProvider,
    output: OutputFn = print
) -> Optional[FetchFolderResponse]:
    """Fetch folders and print them, or print the error.

    Returns the response, which is None only when the fetch failed before a
    response was produced.
    """
    try:
        response = fetch_folders_by_org_id(request, provider)
    except ProblemDetailException as e:
        logger.debug(f"Fetch failed: {e}")
        output(str(e))
        return getattr(e, "response", None)

    pretty_print(response, output)
    return response


def run_dump(request: FetchFolderRequest, provider: FolderProvider, output: OutputFn = print) -> None:
    """Fetch and print every folder for the request's organization."""
    request = request.model_copy(update={"paginate": False, "page_token": ""})
    fetch_and_print(request, provider, output)


def run_paginate(
    request: FetchFolderRequest,
    provider: FolderProvider,
    input_fn: InputFn = input,
    output: OutputFn = print
) -> None:
    """Page through an organization's folders until the last page or exit."""
    request = request.model_copy(update={"paginate": True, "page_token": ""})

    while True:
        if request.page_token:
            output(f"Using page token: {request.page_token}")
        else:
            output("Fetching the first page.")

        response = fetch_and_print(request, provider, output)
        if response is None or not response.next_page_token:
            output("No more pages available.")
            return

        output("\nOptions:")
        output("1. Fetch next page")
        output("2. Exit")
        if input_fn("Enter your choice (1 or 2): ").strip() != "1":
            output("Exiting pagination.")
            return

        request = request.model_copy(update={"page_token": response.next_page_token})


def prompt_mode(input_fn: InputFn = input, output: OutputFn = print) -> str:
    """Ask for DUMP or PAGINATE, defaulting to DUMP on anything else."""
    output("Select an option:")
    output("1. DUMP (receive ALL data in a single output)")
    output("2. PAGINATE (receive paginated data)")
    choice = input_fn("Enter your choice (1 or 2): ").strip()

    if choice == "1":
        output("You selected DUMP.")
        return "dump"
    if choice == "2":
        output("You selected PAGINATE.")
        return "paginate"

    output("Invalid choice. Defaulting to DUMP.")
    return "dump"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the folder-store command."""
    parser = argparse.ArgumentParser(
        prog="folder-store",
        description="Browse an organization's folders"
    )
    parser.add_argument(
        "--org-id", type=UUID, default=None,
        help="Organization ID (defaults to the configured organization)"
    )
    parser.add_argument(
        "--data-file", default=None,
        help="JSON or YAML folder data file (defaults to the bundled sample)"
    )
    parser.add_argument(
        "--mode", choices=["dump", "paginate"], default=None,
        help="Skip the prompt and dump or paginate directly"
    )
    parser.add_argument(
        "--exclude-deleted", action="store_true",
        help="Leave out soft-deleted folders"
    )
    return parser


def main(
    argv: Optional[List[str]] = None,
    input_fn: InputFn = input,
    output: OutputFn = print
) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
        stream=sys.stderr
    )

    provider = file_folder_provider(args.data_file or settings.data_file)
    try:
        provider.get_folders()
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.debug(f"Loading {provider.path} failed", exc_info=True)
        output(f"Failed to load folders from {provider.path}: {e}")
        return 1

    request = FetchFolderRequest(
        org_id=args.org_id or settings.default_org_id,
        include_deleted=not args.exclude_deleted
    )

    mode = args.mode or prompt_mode(input_fn, output)
    if mode == "paginate":
        run_paginate(request, provider, input_fn, output)
    else:
        run_dump(request, provider, output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
