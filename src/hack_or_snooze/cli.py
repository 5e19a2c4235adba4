"""CLI for the Hack or Snooze story sharing service."""

import argparse
import asyncio
import getpass
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from hack_or_snooze.api.client import StoryApi
from hack_or_snooze.config import create_from_config, get_default_config_path, load_config
from hack_or_snooze.config.models import HackOrSnoozeConfig
from hack_or_snooze.credentials import CredentialStore
from hack_or_snooze.data import NewStory, Story
from hack_or_snooze.errors import HackOrSnoozeError, ParseError
from hack_or_snooze.stories import StoryList
from hack_or_snooze.users import User

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: str
    config: Path | None = None
    verbose: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def _format_story(story: Story) -> str:
    try:
        host = story.get_host_name()
    except ParseError:
        host = "invalid url"
    return f"[{story.story_id}] {story.title} ({host}) by {story.author}, posted by {story.username}"


def _print_stories(stories: list[Story], empty: str) -> None:
    if not stories:
        print(empty)
        return
    for story in stories:
        print(_format_story(story))


async def _require_user(api: StoryApi, store: CredentialStore) -> User:
    user = await User.restore(api, store)
    if user is None:
        raise HackOrSnoozeError("Not logged in. Run `hack-or-snooze login` first.")
    return user


async def _find_story(api: StoryApi, user: User, story_id: str) -> Story:
    for story in user.favorites + user.own_stories:
        if story.story_id == story_id:
            return story
    feed = await StoryList.get_stories(api)
    story = feed.find(story_id)
    if story is None:
        raise HackOrSnoozeError(f"Story {story_id} is not in the feed")
    return story


async def run(args: CLIArgs, ns: argparse.Namespace, config: HackOrSnoozeConfig) -> None:
    """Execute one command.

    Args:
        args: Validated CLI arguments.
        ns: Raw namespace carrying the command's own options.
        config: Loaded configuration.
    """
    api, store = create_from_config(config)
    command = args.command

    if command == "stories":
        feed = await StoryList.get_stories(api)
        _print_stories(feed.stories, "No stories.")
        return

    if command in ("signup", "login"):
        password = getpass.getpass("Password: ")
        if command == "signup":
            user = await User.signup(api, ns.username, password, ns.name)
        else:
            user = await User.login(api, ns.username, password)
        store.save(user)
        logger.info(f"Logged in as {user.username} ({user.name})")
        return

    if command == "logout":
        store.clear()
        logger.info("Logged out")
        return

    user = await _require_user(api, store)

    if command == "whoami":
        print(f"{user.username} ({user.name}), member since {user.created_at}")
        print(f"{len(user.own_stories)} stories, {len(user.favorites)} favorites")
    elif command == "favorites":
        _print_stories(user.favorites, "No favorites added!")
    elif command == "mine":
        _print_stories(user.own_stories, "No stories added by user yet!")
    elif command == "submit":
        feed = StoryList(api)
        story = await feed.add_story(user, NewStory(title=ns.title, author=ns.author, url=ns.url))
        print(_format_story(story))
    elif command == "delete":
        await StoryList(api).remove_story(user, ns.story_id)
        logger.info(f"Deleted story {ns.story_id}")
    elif command in ("favorite", "unfavorite"):
        story = await _find_story(api, user, ns.story_id)
        if command == "favorite":
            await user.add_favorite(story)
        else:
            await user.remove_favorite(story)
        logger.info(f"{command.capitalize()}d {story.title}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Share and favorite stories on Hack or Snooze.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml if present)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Log HTTP requests",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("stories", help="List the story feed")

    signup = sub.add_parser("signup", help="Create an account and log in")
    signup.add_argument("username")
    signup.add_argument("name", help="Full name")

    login = sub.add_parser("login", help="Log in and remember the session")
    login.add_argument("username")

    sub.add_parser("logout", help="Forget the stored session")
    sub.add_parser("whoami", help="Show the logged in user")
    sub.add_parser("favorites", help="List your favorite stories")
    sub.add_parser("mine", help="List the stories you posted")

    submit = sub.add_parser("submit", help="Post a new story")
    submit.add_argument("--title", required=True)
    submit.add_argument("--author", required=True)
    submit.add_argument("--url", required=True)

    for name, help_text in (
        ("delete", "Delete one of your stories"),
        ("favorite", "Add a story to your favorites"),
        ("unfavorite", "Remove a story from your favorites"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("story_id")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    ns = build_parser().parse_args(argv)

    try:
        args = CLIArgs(command=ns.command, config=ns.config, verbose=ns.verbose)
        config_path = args.config or get_default_config_path()
        config = load_config(config_path) if config_path.exists() else HackOrSnoozeConfig()
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(str(e))
        sys.exit(1)

    level = logging.DEBUG if args.verbose else config.logging.level
    logging.basicConfig(level=level, format=config.logging.format)

    try:
        asyncio.run(run(args, ns, config))
    except HackOrSnoozeError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
