"""Application use-cases orchestrating manifest collection and writing."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pydantic import ValidationError

from qapp_packager.application.options import (
    DEFAULT_MANIFEST_NAME,
    ManifestOptions,
    OpenOptions,
    RenderOptions,
)
from qapp_packager.application.ports import ManifestWriter, Prompter
from qapp_packager.application.results import ManifestResult, WriteOutcome
from qapp_packager.errors import FieldValidationError, MenuSelectionError
from qapp_packager.infrastructure.files import FileManifestWriter, read_manifest_table
from qapp_packager.render import MANIFEST_TABLE, render_app_toml
from qapp_packager.schemas import AppManifest, ApplicationRecord
from qapp_packager.types import FieldName
from qapp_packager.validate import (
    split_authors,
    split_other_metadata,
    validate_repo_url,
    validate_version,
)

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the interactive Quantii Application packager."
CREATING_MESSAGE = "Creating application..."
DONE_MESSAGE = "Done!"
ABORT_MESSAGE = "Aborting..."
INVALID_CHOICE_MESSAGE = "Invalid input"
MENU_PROMPT = ""
NEW_FILENAME_PROMPT = "Enter new filename: "
MENU_LINES = (
    "How to continue?",
    "1. Overwrite",
    "2. Abort",
    "3. Different filename",
)

FIELD_PROMPTS: dict[FieldName, str] = {
    "name": "Name of application: ",
    "repo": "Repository link: ",
    "version": "Version of application: ",
    "authors": "Author(s) of application, seperated by commas: ",
    "description": "Description of application: ",
    "icon": "File to icon of application: ",
    "other_metadata": "Other metadata of application, seperated by commas: ",
}

_MENU_CHOICE_PATTERN = re.compile(r"[+-]?[0-9]+")
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


def collect_record(prompter: Prompter) -> ApplicationRecord:
    """Use-case: prompt for every field in order and build the record.

    The repository link and version are checked as soon as they are read,
    so a bad value stops the run before later prompts appear.
    """
    name = prompter.ask(FIELD_PROMPTS["name"])
    repo = validate_repo_url(prompter.ask(FIELD_PROMPTS["repo"]))
    version = prompter.ask(FIELD_PROMPTS["version"])
    validate_version(version)
    authors = split_authors(prompter.ask(FIELD_PROMPTS["authors"]))
    description = prompter.ask(FIELD_PROMPTS["description"])
    icon = prompter.ask(FIELD_PROMPTS["icon"])
    other_metadata = split_other_metadata(prompter.ask(FIELD_PROMPTS["other_metadata"]))

    try:
        return ApplicationRecord(
            name=name,
            repo=repo,
            version=version,
            authors=authors,
            description=description,
            icon=icon,
            other_metadata=other_metadata,
        )
    except ValidationError as exc:
        raise FieldValidationError(f"Invalid application metadata: {exc}") from exc


def parse_menu_choice(raw: str) -> int:
    """Parse a conflict-menu selection.

    Raises
    ------
    MenuSelectionError
        If ``raw`` is not an integer or does not fit a signed 32-bit value.
        Other out-of-range integers are returned for the caller to reject.
    """
    if not _MENU_CHOICE_PATTERN.fullmatch(raw):
        raise MenuSelectionError(f"Invalid menu selection '{raw}': expected a number")
    choice = int(raw)
    if not I32_MIN <= choice <= I32_MAX:
        raise MenuSelectionError(f"Invalid menu selection '{raw}': number out of range")
    return choice


def write_manifest(
    *,
    text: str,
    target: Path,
    prompter: Prompter,
    writer: ManifestWriter | None = None,
) -> WriteOutcome:
    """Use-case: write ``text`` to ``target``, asking what to do on conflict."""
    writer = writer or FileManifestWriter()

    if not target.exists():
        path = writer.write(target, text, OpenOptions.create_exclusive())
        prompter.say(DONE_MESSAGE)
        return WriteOutcome(status="written", path=path)

    logger.info("%s already exists; asking operator how to continue", target)
    prompter.say(f"{target} already exists.")
    while True:
        for line in MENU_LINES:
            prompter.say(line)
        choice = parse_menu_choice(prompter.ask(MENU_PROMPT))

        if choice == 1:
            prompter.say(f"Overwriting {target}...")
            path = writer.write(target, text, OpenOptions.overwrite())
            prompter.say(DONE_MESSAGE)
            return WriteOutcome(status="overwritten", path=path)
        if choice == 2:
            prompter.say(ABORT_MESSAGE)
            return WriteOutcome(status="aborted")
        if choice == 3:
            new_target = Path(prompter.ask(NEW_FILENAME_PROMPT))
            path = writer.write(new_target, text, OpenOptions.create_exclusive())
            prompter.say(DONE_MESSAGE)
            return WriteOutcome(status="written_as_new_file", path=path)

        logger.debug("menu choice %d out of range", choice)
        prompter.say(INVALID_CHOICE_MESSAGE)


def create_manifest(
    *,
    prompter: Prompter,
    options: ManifestOptions,
    writer: ManifestWriter | None = None,
) -> ManifestResult:
    """Use-case: collect metadata interactively, render it and write it."""
    prompter.say(WELCOME_MESSAGE)
    record = collect_record(prompter)
    prompter.say(CREATING_MESSAGE)

    if not record.icon_path.exists():
        logger.info("icon %s does not exist (not required)", record.icon_path)

    text = render_app_toml(record, split_authors=options.render.split_authors)
    outcome = write_manifest(
        text=text,
        target=options.output_path,
        prompter=prompter,
        writer=writer,
    )
    return ManifestResult(record=record, text=text, outcome=outcome)


def load_manifest(path: Path) -> AppManifest:
    """Use-case: read and validate the ``[app]`` table of an existing manifest."""
    table = read_manifest_table(path, MANIFEST_TABLE)
    try:
        return AppManifest.model_validate(table)
    except ValidationError as exc:
        raise FieldValidationError(f"Invalid manifest '{path}': {exc}") from exc


def build_manifest_options(
    *,
    output_path: Path | None = None,
    split_authors: bool = False,
) -> ManifestOptions:
    """Build typed option object from command/API params."""
    return ManifestOptions(
        output_path=output_path or Path(DEFAULT_MANIFEST_NAME),
        render=RenderOptions(split_authors=split_authors),
    )
