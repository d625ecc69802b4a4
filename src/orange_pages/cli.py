"""Orange Pages command line tools.

Inspect the permission model without running the service: derive a
capability set, evaluate the access guard, or mint a development
session token.
"""

import typer
from rich.console import Console
from rich.table import Table

from orange_pages import __version__
from orange_pages.core.permissions import (
    Capability,
    GuardOutcome,
    MemberTier,
    TeamRole,
    capability_label,
    check_access,
    derive_capabilities,
    max_team_members,
    parse_member_tier,
    parse_team_role,
    role_display_name,
    tier_display_name,
)
from orange_pages.core.session import (
    OrganizationMembership,
    SessionState,
    create_session_token,
)


console = Console()

app = typer.Typer(
    name="orange-pages",
    help="Inspect member dashboard permissions.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

CLI_ORGANIZATION_ID = "cli-organization"


def _role(value: str | None) -> TeamRole | None:
    role = parse_team_role(value)
    if value and value.strip().lower() != "none" and role is None:
        choices = ", ".join(r.value for r in TeamRole)
        raise typer.BadParameter(f"Unknown role {value!r}. Choose from: {choices}")
    return role


def _tier(value: str | None) -> MemberTier | None:
    tier = parse_member_tier(value)
    if value and value.strip().lower() != "none" and tier is None:
        choices = ", ".join(t.value for t in MemberTier)
        raise typer.BadParameter(f"Unknown tier {value!r}. Choose from: {choices}")
    return tier


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """Orange Pages permission tools."""
    if version:
        console.print(f"[bold cyan]orange-pages[/bold cyan] version {__version__}")
        raise typer.Exit()


@app.command(name="capabilities")
def capabilities(
    role: str | None = typer.Option(None, "--role", "-r", help="Team role."),
    tier: str | None = typer.Option(None, "--tier", "-t", help="Membership tier."),
    inactive: bool = typer.Option(
        False, "--inactive", help="Treat the membership as lapsed."
    ),
) -> None:
    """Show the capability set derived from a role and tier."""
    team_role = _role(role)
    member_tier = _tier(tier)
    derived = derive_capabilities(team_role, member_tier, not inactive)

    table = Table(
        title=(
            f"{role_display_name(derived.team_role)} / "
            f"{tier_display_name(derived.tier)}"
        ),
        show_header=True,
    )
    table.add_column("Capability", style="cyan", no_wrap=True)
    table.add_column("Label")
    table.add_column("Granted", no_wrap=True)

    for capability in Capability:
        granted = derived.has(capability)
        table.add_row(
            capability.value,
            capability_label(capability),
            "[green]yes[/green]" if granted else "[red]no[/red]",
        )

    console.print()
    console.print(f"Member: {'yes' if derived.is_member else 'no'}")
    seats = max_team_members(derived.tier)
    console.print(f"Team seats: {'unlimited' if seats is None else seats}")
    console.print(table)
    console.print()


@app.command(name="check")
def check(
    capability: str = typer.Argument(..., help="Capability the view requires."),
    role: str | None = typer.Option(None, "--role", "-r", help="Team role."),
    tier: str | None = typer.Option(None, "--tier", "-t", help="Membership tier."),
    inactive: bool = typer.Option(
        False, "--inactive", help="Treat the membership as lapsed."
    ),
    no_company: bool = typer.Option(
        False, "--no-company", help="Evaluate without an active organization."
    ),
    redirect_to: str | None = typer.Option(
        None, "--redirect-to", help="Redirect target when access is denied."
    ),
    loading: bool = typer.Option(
        False, "--loading", help="Evaluate while the session is still resolving."
    ),
) -> None:
    """Evaluate the access guard for a capability."""
    membership = OrganizationMembership(
        organization_id=CLI_ORGANIZATION_ID,
        team_role=_role(role),
        tier=_tier(tier),
        membership_active=not inactive,
    )
    session = SessionState(
        user_id="cli-user",
        memberships=(membership,),
        active_organization_id=None if no_company else CLI_ORGANIZATION_ID,
        is_loading=loading,
    )

    decision = check_access(session, capability, redirect_to=redirect_to)

    if decision.outcome is GuardOutcome.ALLOW:
        console.print("[green]allow[/green]")
    elif decision.outcome is GuardOutcome.PENDING:
        console.print("[yellow]pending[/yellow]")
    else:
        console.print(f"[red]redirect[/red] -> {decision.target}")


@app.command(name="token")
def token(
    user_id: str = typer.Option(..., "--user-id", "-u", help="User id (sub claim)."),
    organization_id: str | None = typer.Option(
        None, "--organization-id", "-o", help="Organization to embed."
    ),
    organization_name: str | None = typer.Option(
        None, "--organization-name", help="Organization display name."
    ),
    role: str | None = typer.Option(None, "--role", "-r", help="Team role."),
    tier: str | None = typer.Option(None, "--tier", "-t", help="Membership tier."),
    inactive: bool = typer.Option(
        False, "--inactive", help="Embed a lapsed membership."
    ),
    super_admin: bool = typer.Option(
        False, "--super-admin", help="Mark the user as a platform super admin."
    ),
) -> None:
    """Mint a development session token signed with SESSION_SECRET."""
    memberships = []
    if organization_id:
        memberships.append(
            OrganizationMembership(
                organization_id=organization_id,
                team_role=_role(role),
                tier=_tier(tier),
                membership_active=not inactive,
                is_primary=True,
                organization_name=organization_name,
            )
        )

    typer.echo(create_session_token(user_id, memberships, is_super_admin=super_admin))


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
