"""CLI Commands"""

import os
import sys

from commitgen.output import bold, dim


def run_install_completion() -> int:
    """Print shell tab completion setup."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    line = 'eval "$(register-python-argcomplete commitgen)"'
    if 'zsh' in shell or 'bash' in shell:
        rc_name = '~/.zshrc' if 'zsh' in shell else '~/.bashrc'
        print(f"Add this line to {dim(os.path.expanduser(rc_name))}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim(f'source {rc_name}')}")
    elif sys.platform == 'win32':
        print("For PowerShell, add this to your $PROFILE:\n")
        print("  register-python-argcomplete --shell powershell commitgen | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish commitgen | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
