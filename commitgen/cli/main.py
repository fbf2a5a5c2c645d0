"""CLI Main Entry Point"""

import time
from pathlib import Path
from typing import Callable

from commitgen.config import Config, ConfigError, load_config
from commitgen.git import GitError, GitRepository, VersionControl
from commitgen.llm import GroqClient, LLMClient, LLMError, LLMResponse
from commitgen.output import dim, info, print_error, print_success, print_warning, success, Spinner

from commitgen.cli.args import parse_args
from commitgen.cli.commands import run_install_completion
from commitgen.cli.menu import Decision, display_menu, read_decision

NO_CHANGES_MESSAGE = "No changes detected in the file."
ABORT_MESSAGE = "Commit aborted."
SUCCESS_MESSAGE = "Successfully committed changes!"


def _load_config(args) -> Config:
    """Load .env config and apply CLI overrides.

    Precedence: CLI args > environment variables > .env file > defaults
    """
    env_file = Path(args.env_file).expanduser() if args.env_file else None
    config = load_config(env_file)
    if args.model:
        config.model = args.model
    if args.timeout:
        config.timeout = args.timeout
    return config


def _generate_message(client: LLMClient, diff: str, timings: dict) -> LLMResponse:
    """Run LLM generation with spinner and return response."""
    print(f"Generating commit message using {info(client.name)}... ", end='', flush=True)
    t_gen = time.time()
    try:
        with Spinner():
            response = client.generate(diff)
    except LLMError:
        print()
        raise
    timings['generate'] = time.time() - t_gen
    print(success("done!"))
    return response


def _print_verbose_stats(diff: str, response: LLMResponse, timings: dict) -> None:
    print(dim(f"  Diff: ~{len(diff)//4} tokens ({len(diff)} chars)"))
    print(dim(f"  Response: {response.tokens_used} tokens"))
    print(dim(f"  Timings: git={timings.get('git', 0):.2f}s, generate={timings.get('generate', 0):.2f}s"))


def run_commit_flow(
    vcs: VersionControl,
    client: LLMClient,
    input_fn: Callable[[str], str] | None = None,
    verbose: bool = False,
) -> int:
    """Diff, generate, ask, commit.

    Returns:
        int: Exit code. Errors from git or the LLM propagate to the caller.
    """
    timings = {}
    t0 = time.time()
    diff = vcs.staged_diff()
    timings['git'] = time.time() - t0

    if not diff:
        print_warning(NO_CHANGES_MESSAGE)
        return 0

    # Generation + menu loop (option 3 regenerates)
    while True:
        response = _generate_message(client, diff, timings)
        if verbose:
            _print_verbose_stats(diff, response, timings)

        message = response.content
        display_menu(message)
        decision = read_decision(input_fn)
        if decision is not Decision.REGENERATE:
            break
        print(dim("Regenerating..."))

    if decision in (Decision.COMMIT, Decision.EDIT):
        vcs.commit(message, edit=decision is Decision.EDIT)
        print_success(SUCCESS_MESSAGE)
    else:
        print(ABORT_MESSAGE)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.install_completion:
        return run_install_completion()

    try:
        config = _load_config(args)
        if args.verbose:
            print(dim(f"  Env file: {config.env_file}"))
        repo = GitRepository(Path.cwd())
        client = GroqClient(config)
        return run_commit_flow(repo, client, verbose=args.verbose)
    except (ConfigError, GitError, LLMError) as e:
        print_error(str(e))
        return 1
