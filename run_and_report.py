# run_and_report.py
import logging
import sys
from typing import List, Optional

from arg_parser import UsageError, parse_args
from process_runner import LaunchError, run_command
from report_sender import send_report
from utils.notifier import WebhookError

log = logging.getLogger("job-notify")


def setup_logging() -> None:
    logging.basicConfig(level=logging.INFO)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse -> run -> report. Returns the wrapped command's exit code,
    or 1 if anything along the way fails (nothing is retried).
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        invocation = parse_args(argv)
        result = run_command(invocation.command, invocation.command_args)
        send_report(invocation, result)
    except (UsageError, LaunchError, WebhookError) as e:
        log.error("%s", e)
        return 1

    log.info("Report for job %r sent", invocation.job_name)
    return result.exit_code


def cli() -> None:
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    cli()
