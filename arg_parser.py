# arg_parser.py
from dataclasses import dataclass, field
from typing import List, Optional

FLAG_PREFIX = "--"


class UsageError(ValueError):
    """Bad command line: missing/unknown flag or no command to run."""


@dataclass(frozen=True)
class Invocation:
    job_name: str
    webhook_url: str
    command: str
    command_args: List[str] = field(default_factory=list)


def parse_args(argv: List[str]) -> Invocation:
    """
    Parse `--name <job> --url <webhook> <command> [args...]`.
    Flags are only read up to the first token without the `--` prefix;
    everything from there on belongs to the command, taken literally.
    A repeated flag silently replaces the earlier value.
    """
    tokens = list(argv)
    job_name: Optional[str] = None
    webhook_url: Optional[str] = None

    while tokens and tokens[0].startswith(FLAG_PREFIX):
        flag = tokens.pop(0)
        if not tokens:
            raise UsageError(f"Missing value for option {flag}")
        value = tokens.pop(0)

        name = flag[len(FLAG_PREFIX):]
        if name == "name":
            job_name = value
        elif name == "url":
            webhook_url = value
        else:
            raise UsageError(f"Unknown option: {flag}")

    if job_name is None:
        raise UsageError("Missing job name")
    if webhook_url is None:
        raise UsageError("Missing webhook url")
    if not tokens:
        raise UsageError("Missing command")

    return Invocation(
        job_name=job_name,
        webhook_url=webhook_url,
        command=tokens[0],
        command_args=tokens[1:],
    )
