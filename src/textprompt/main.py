"""Entry point for the textprompt CLI: ask one question and print the answer."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys


def main() -> None:
    parser = argparse.ArgumentParser(description="textprompt: ask a question on the terminal")
    parser.add_argument("message", help="Question to ask")
    parser.add_argument("--name", default="answer", help="Prompt name (default: answer)")
    parser.add_argument("--initial", default=None, help="Default value shown as ghost text")
    parser.add_argument("--hint", default="", help="Hint shown after the input")
    parser.add_argument("--multiline", action="store_true", help="Enter inserts a newline; press it twice to submit")
    parser.add_argument("--history", default=None, help="JSON file remembering past answers")
    parser.add_argument("--autosave", action="store_true", help="Save answers to history on submit")
    parser.add_argument("--log-file", default=None, help="Write logs to this file")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    args = parser.parse_args()

    # The prompt owns the terminal, so logs only go to a file
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level.upper()),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    from textprompt.config import HistoryOptions, PromptOptions
    from textprompt.errors import PromptCancelled
    from textprompt.prompts import create_prompt
    from textprompt.store import JsonStore

    history = None
    if args.history:
        history = HistoryOptions(store=JsonStore(args.history), autosave=args.autosave)

    options = PromptOptions(
        name=args.name,
        message=args.message,
        initial=args.initial,
        hint=args.hint,
        multiline=args.multiline,
        history=history,
    )

    try:
        answer = asyncio.run(create_prompt(options).run())
    except PromptCancelled:
        sys.exit(130)

    print(answer)


if __name__ == "__main__":
    main()
