"""CLI Commands"""

import os
import sys

from commitfmt import WRAP_WIDTH
from commitfmt.config import Config, load_config, save_config, get_config_path
from commitfmt.git import GitError, GitRepository, install_commit_msg_hook
from commitfmt.output import bold, dim, info, print_success, print_error


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .commitfmtrc found)")

    env_width = os.environ.get('COMMITFMT_WIDTH')
    if env_width:
        print(f"  {dim('Environment overrides:')}")
        print(f"    COMMITFMT_WIDTH={env_width}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    wrap_width:        {info(str(config.wrap_width))}")
    print(f"    trailer_prefixes:  {info(', '.join(config.trailer_prefixes) or 'none')}")
    print(f"    in_place:          {info(str(config.in_place).lower())}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .commitfmtrc (in current directory)")
    print(f"    Global: ~/.commitfmtrc")
    print(f"\n  {dim('Run')} commitfmt --setup {dim('to configure')}\n")

    return 0


def run_setup() -> int:
    """Quick setup wizard."""
    display_config()
    print(f"{bold('Setup Wizard')}\n")

    print(f"Wrap body paragraphs at column (Enter for {WRAP_WIDTH}): ", end='')
    width_input = input().strip()
    wrap_width = int(width_input) if width_input.isdigit() and int(width_input) > 0 else WRAP_WIDTH

    print("\nExtra trailer prefixes, comma separated (e.g. 'Change-Id: ', Enter for none): ", end='')
    prefixes_input = input().strip()
    trailer_prefixes = [p.strip() + ' ' for p in prefixes_input.split(',') if p.strip()]

    print("\nRewrite files in place by default? [y/N]: ", end='')
    in_place = input().strip().lower() == 'y'

    config = Config(
        wrap_width=wrap_width,
        trailer_prefixes=trailer_prefixes,
        in_place=in_place,
    )
    path = save_config(config, global_config=True)

    print_success(f"Saved to {path}")
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell:
        rc_file = os.path.expanduser('~/.zshrc')
        line = 'eval "$(register-python-argcomplete commitfmt)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ~/.zshrc')}")
    elif 'bash' in shell:
        rc_file = os.path.expanduser('~/.bashrc')
        line = 'eval "$(register-python-argcomplete commitfmt)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ~/.bashrc')}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell commitfmt | Out-String | Invoke-Expression\n")
        print("To make it permanent, add to your $PROFILE:\n")
        print("  register-python-argcomplete --shell powershell commitfmt | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print('  eval "$(register-python-argcomplete commitfmt)"\n')
        print(f"  {dim('# PowerShell')}")
        print("  register-python-argcomplete --shell powershell commitfmt | Out-String | Invoke-Expression\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish commitfmt | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0


def run_install_hook(force: bool = False) -> int:
    """Install the commit-msg hook into the current repository."""
    try:
        repo = GitRepository()
        path = install_commit_msg_hook(repo, force=force)
    except GitError as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"Could not write hook: {e}")
        return 1

    print_success(f"Installed {path}")
    print(dim("Every commit message will be formatted when you commit."), file=sys.stderr)
    return 0
