"""CLI Main Entry Point"""

import os
import sys
import time
from collections import Counter

from commitfmt.config import load_config
from commitfmt.formatter import apply_edits, format_edits, get_chunks, split_lines
from commitfmt.git import GitError, GitRepository
from commitfmt.output import print_error, print_success, print_verbose, print_warning
from commitfmt.views import folding_ranges, outline, subject_range

from commitfmt.cli.args import parse_args
from commitfmt.cli.commands import display_config, run_setup, run_install_completion, run_install_hook
from commitfmt.cli.utils import (
    STDIN, read_message, write_message, to_json,
    render_chunks, render_edits, render_folds, render_outline, render_subject,
)


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    if args.setup:
        return run_setup(), True
    if args.install_hook:
        return run_install_hook(force=args.force), True
    return 0, False


def _get_width(args, config):
    """Resolve wrap width from args, env, or config.

    Precedence: CLI args > environment variables > config file
    """
    if args.width:
        return args.width
    env_width = os.environ.get('COMMITFMT_WIDTH')
    if env_width:
        if env_width.isdigit() and int(env_width) > 0:
            return int(env_width)
        print_warning(f"Ignoring invalid COMMITFMT_WIDTH '{env_width}'")
    return config.wrap_width


def _print_verbose_stats(lines, prefixes, timings):
    chunks = get_chunks(lines, prefixes)
    counts = Counter(chunk.kind.value for chunk in chunks)
    summary = ', '.join(f"{kind}={count}" for kind, count in sorted(counts.items()))
    print_verbose(f"Lines: {len(lines)}, chunks: {len(chunks)} ({summary or 'none'})")
    print_verbose(f"Timings: read={timings['read']:.3f}s, format={timings['format']:.3f}s")


def _show_view(args, lines, prefixes):
    """Print the requested inspection view. Returns False if none was requested."""
    if args.chunks:
        items = get_chunks(lines, prefixes)
        text = to_json(items) if args.json else render_chunks(items, lines)
    elif args.outline:
        items = outline(lines, prefixes)
        text = to_json(items) if args.json else render_outline(items)
    elif args.folds:
        items = folding_ranges(lines, prefixes)
        text = to_json(items) if args.json else render_folds(items)
    elif args.subject:
        item = subject_range(lines, prefixes)
        text = to_json(item) if args.json else render_subject(item)
    elif args.edits:
        items = format_edits(lines, args.width, prefixes)
        text = to_json(items) if args.json else render_edits(items)
    else:
        return False
    if text:
        print(text)
    return True


def _format_flow(args, config):
    """Read, format and write a commit message.

    Returns:
        int: Exit code
    """
    if args.file == STDIN and sys.stdin.isatty():
        # Nothing piped in: format the message of the commit in progress
        try:
            args.file = str(GitRepository().commit_message_path)
        except GitError as e:
            print_error(str(e))
            return 1

    timings = {}
    t0 = time.time()
    try:
        original = read_message(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Could not read {args.file}: {e}")
        return 1
    timings['read'] = time.time() - t0

    prefixes = list(config.trailer_prefixes) + list(args.trailer_prefixes or [])
    lines = split_lines(original)

    if _show_view(args, lines, prefixes):
        return 0

    t0 = time.time()
    edits = format_edits(lines, args.width, prefixes)
    formatted = apply_edits(lines, edits)
    timings['format'] = time.time() - t0

    if args.verbose:
        _print_verbose_stats(lines, prefixes, timings)

    if args.check:
        if formatted == original:
            return 0
        name = 'stdin' if args.file == STDIN else args.file
        print_warning(f"{name} would be reformatted ({len(edits)} change{'s' if len(edits) != 1 else ''})")
        return 1

    in_place = args.in_place if args.in_place is not None else config.in_place
    if in_place and args.file != STDIN:
        if formatted != original:
            try:
                write_message(args.file, formatted)
            except OSError as e:
                print_error(f"Could not write {args.file}: {e}")
                return 1
            if args.verbose:
                print_success(f"Reformatted {args.file}")
        return 0

    sys.stdout.write(formatted)
    if formatted and not formatted.endswith('\n') and sys.stdout.isatty():
        sys.stdout.write('\n')
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    config = load_config()
    args.width = _get_width(args, config)

    return _format_flow(args, config)


if __name__ == "__main__":
    sys.exit(main())
