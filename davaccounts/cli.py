"""Command line administration of DAV accounts."""

import click

from . import accounts, exceptions
from .factory import create_app


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """Create, update and delete CalDAV/CardDAV accounts."""
    ctx.ensure_object(dict)
    if 'app' not in ctx.obj:
        ctx.obj['app'] = create_app()


@main.command()
@click.option('--username', prompt='Username',
              help='Login for the account. It has to be unique.')
@click.option('--displayname', prompt='Display name',
              help='Name shown in CalDAV/CardDAV clients.')
@click.option('--email', prompt='Email')
@click.option('--password', prompt='Password', hide_input=True,
              confirmation_prompt=True)
@click.pass_obj
def create(obj: dict, username: str, displayname: str, email: str,
           password: str) -> None:
    """Create an account with a default calendar and address book."""
    with obj['app'].app_context():
        try:
            account = accounts.create_account(username, displayname, email,
                                              password)
        except (ValueError, exceptions.AccountExists,
                exceptions.RegistrationFailed) as e:
            raise click.ClickException(str(e)) from e
        click.echo(f'Created {account.principal_uri}')


@main.command()
@click.argument('username')
@click.option('--password', prompt='New password', hide_input=True,
              confirmation_prompt=True)
@click.pass_obj
def passwd(obj: dict, username: str, password: str) -> None:
    """Change the password of an account."""
    with obj['app'].app_context():
        try:
            account = accounts.get_account_by_username(username)
            accounts.update_account(account.get_primary(), password=password)
        except (exceptions.NoSuchAccount, exceptions.PrincipalNotBound) as e:
            raise click.ClickException(str(e)) from e
        click.echo(f'Password changed for {username}')


@main.command()
@click.argument('username')
@click.confirmation_option(prompt='Delete the account and its collections?')
@click.pass_obj
def delete(obj: dict, username: str) -> None:
    """Delete an account with its principal, calendars and address books."""
    with obj['app'].app_context():
        try:
            account = accounts.get_account_by_username(username)
        except exceptions.NoSuchAccount as e:
            raise click.ClickException(str(e)) from e
        accounts.delete_account(account.get_primary())
        click.echo(f'Deleted {username}')


@main.command(name='list')
@click.pass_obj
def list_(obj: dict) -> None:
    """List accounts."""
    with obj['app'].app_context():
        for summary in accounts.list_accounts():
            click.echo(f'{summary.account_id}\t{summary.username}\t'
                       f'{summary.mailto}\t{summary.calendars} calendar(s)\t'
                       f'{summary.addressbooks} address book(s)')
