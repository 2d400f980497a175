#!/usr/bin/env python3
"""
KeyScore - Password strength analyzer CLI
"""
import json

import click
from tabulate import tabulate

from . import __version__
from .entropy import get_time_to_crack
from .patterns import DEFAULT_REPEAT_LENGTH, DEFAULT_SEQUENCE_LENGTH
from .strength import AnalysisResult, PasswordAnalyzer, format_strength_bar
from .wordlist import load_common_passwords

RECOMMENDATION = ("Use a longer passphrase (at least 12 characters), mix character "
                  "types, and avoid common words.")
WEAK_THRESHOLD = 40

STRENGTH_EMOJI = {
    'very_strong': '🟢',
    'strong': '🟡',
    'fair': '🟠',
    'weak': '🔴',
    'very_weak': '🔴',
}


def strip_line_ending(line: str) -> str:
    """Drop the trailing newline and a carriage return left by CRLF input"""
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line


def mask_password(password: str, width: int = 16) -> str:
    """Hide a password for tabular display"""
    if len(password) <= 2:
        return '*' * len(password)
    hidden = min(len(password) - 2, width - 2)
    return password[0] + '*' * hidden + password[-1]


def render_result(result: AnalysisResult) -> None:
    """Print one analysis result"""
    click.echo(f"\nScore: {result.score} / 100")
    click.echo(f"Strength: {format_strength_bar(result.score)}")
    click.echo(f"Estimated entropy (pool-based): {result.pool_entropy_bits:.2f} bits")
    click.echo(f"Estimated entropy (Shannon): {result.shannon_entropy_bits:.2f} bits")
    click.echo(f"Time to crack: {get_time_to_crack(result.pool_entropy_bits)}")
    click.echo("Feedback:")
    for reason in result.reasons:
        click.echo(f" - {reason}")

    if result.score < WEAK_THRESHOLD:
        click.echo(f"Recommendation: {RECOMMENDATION}")


def run_shell(analyzer: PasswordAnalyzer) -> None:
    """Read passwords line by line until end of input"""
    stdin = click.get_text_stream('stdin', errors='surrogateescape')

    click.echo("Password Strength Analyzer")
    click.echo("Type a password and press Enter (Ctrl + D to exit):\n")

    try:
        while True:
            click.echo("Password: ", nl=False)
            line = stdin.readline()
            if not line:
                break

            render_result(analyzer.analyze(strip_line_ending(line)))
            click.echo()
    except KeyboardInterrupt:
        pass

    click.echo("\nGoodbye!")


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="KeyScore")
@click.option('--wordlist', '-w', envvar='KEYSCORE_WORDLIST', type=click.Path(dir_okay=False),
              help='File of common passwords, one per line')
@click.option('--sequence-length', envvar='KEYSCORE_SEQUENCE_LENGTH', type=click.IntRange(min=2),
              default=DEFAULT_SEQUENCE_LENGTH, show_default=True,
              help='Length of ascending/descending runs to flag')
@click.option('--repeat-length', envvar='KEYSCORE_REPEAT_LENGTH', type=click.IntRange(min=2),
              default=DEFAULT_REPEAT_LENGTH, show_default=True,
              help='Length of repeated-character runs to flag')
@click.pass_context
def cli(ctx, wordlist, sequence_length, repeat_length):
    """KeyScore - An offline password strength analyzer

    Scores passwords from 0 to 100 using entropy estimates and weak-pattern
    checks, and explains every deduction. Nothing leaves your machine.

    Run without a command to analyze passwords interactively.
    """
    common = load_common_passwords(wordlist)
    ctx.obj = PasswordAnalyzer(common, sequence_length, repeat_length)

    if ctx.invoked_subcommand is None:
        run_shell(ctx.obj)


@cli.command()
@click.pass_obj
def interactive(analyzer):
    """Analyze passwords typed on standard input"""
    run_shell(analyzer)


@cli.command()
@click.argument('password', required=False)
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@click.pass_obj
def check(analyzer, password, as_json):
    """Analyze a single password

    The password is prompted for (hidden) when not given as an argument.
    """
    if password is None:
        password = click.prompt("Password", hide_input=True, default="", show_default=False)

    result = analyzer.analyze(password)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        render_result(result)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--show', '-S', is_flag=True, help='Show passwords in plain text')
@click.option('--weak-only', is_flag=True, help='Only list weak passwords (score < 60)')
@click.pass_obj
def audit(analyzer, file, show, weak_only):
    """Analyze every password in FILE (one per line)

    Examples:
        keyscore audit leaked.txt              # Strength table
        keyscore audit leaked.txt --weak-only  # Only passwords scoring under 60
        keyscore -w rockyou.txt audit mine.txt # Include common-password check
    """
    with open(file, 'r', encoding='utf-8', errors='surrogateescape') as f:
        entries = [(line_no, strip_line_ending(line)) for line_no, line in enumerate(f, 1)]
    entries = [(line_no, p) for line_no, p in entries if p]

    if not entries:
        click.echo("No passwords to audit")
        return

    click.echo(f"\n🔍 Auditing {len(entries)} password(s)...\n")

    stats = {'very_strong': 0, 'strong': 0, 'fair': 0, 'weak': 0, 'very_weak': 0}
    table_data = []

    for line_no, password in entries:
        result = analyzer.analyze(password)
        stats[result.strength] += 1

        if weak_only and result.score >= 60:
            continue

        table_data.append([
            line_no,
            password if show else mask_password(password),
            f"{STRENGTH_EMOJI[result.strength]} {result.score}",
            result.strength.replace('_', ' ').title(),
            f"{result.pool_entropy_bits:.2f}",
            f"{result.shannon_entropy_bits:.2f}",
            len(result.reasons),
            result.reasons[0][:40],
        ])

    if table_data:
        headers = ['Line', 'Password', 'Score', 'Strength', 'Pool bits', 'Shannon bits', 'Reasons',
                   'Top issue']
        click.echo(tabulate(table_data, headers=headers, tablefmt='simple_grid'))

    total = len(entries)
    click.echo(f"\n📈 Audit Summary:")
    click.echo("=" * 30)
    click.echo(f"Total passwords: {total}")
    for level, count in stats.items():
        label = level.replace('_', ' ').title()
        click.echo(f"{label}: {count} ({count/total*100:.1f}%)")

    weak_count = stats['weak'] + stats['very_weak']
    if weak_count:
        click.echo(f"\n⚠️  {weak_count} password(s) need attention")
        click.echo(f"💡 {RECOMMENDATION}")


# Entry point
if __name__ == '__main__':
    cli()
