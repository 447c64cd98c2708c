"""Keys command: show the canonical form of a key combination."""

import click

from chorder.core.keys import MODIFIER_NAMES, modifiers_from_names, normalize


@click.command(name="keys")
@click.argument("key_name")
@click.argument(
    "modifiers",
    nargs=-1,
    type=click.Choice(sorted(MODIFIER_NAMES), case_sensitive=False),
)
def keys(key_name: str, modifiers: tuple[str, ...]):
    """
    Print the canonical shortcut for KEY_NAME held with MODIFIERS.

    \b
    Examples:
      chorder keys a ctrl shift     # c-s-a
      chorder keys 1 super          # m-1
    """
    click.echo(normalize(key_name, modifiers_from_names(modifiers)))
