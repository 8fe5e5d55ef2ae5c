"""Command-line front end for BudgetBook."""

from __future__ import annotations

from datetime import date

import click

from .config import BaseConfig
from .constants.categories import EXPENSE_CATEGORIES, INCOME_SOURCES, is_known_category, is_known_source
from .context import BudgetContext, create_budget_context
from .logging_config import setup_logging
from .models.records import ExpenseCreate, GoalCreate, IncomeCreate
from .services import summary
from .services.periods import current_month, is_valid_period, matches_period


def _validate_period(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is None or is_valid_period(value):
        return value
    raise click.BadParameter("expected YYYY-MM, e.g. 2024-03")


def _validate_date(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return value
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        parsed = None
    # fromisoformat also takes compact forms such as 20240315
    if parsed is None or parsed.isoformat() != value:
        raise click.BadParameter("expected YYYY-MM-DD, e.g. 2024-03-15")
    return value


period_option = click.option(
    "--period",
    default=None,
    callback=_validate_period,
    help="Restrict to one month (YYYY-MM). Omit for all time.",
)


def _context(ctx: click.Context) -> BudgetContext:
    return ctx.find_object(BudgetContext)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Track expenses, income and savings goals."""

    if ctx.obj is None:
        config = BaseConfig()
        setup_logging(config)
        ctx.obj = create_budget_context(config)
        ctx.call_on_close(ctx.obj.close)


@cli.command("add-expense")
@click.argument("amount", type=float)
@click.argument("category")
@click.option("-d", "--description", default="", help="Free-text note.")
@click.option("--date", "when", default=None, callback=_validate_date, help="YYYY-MM-DD, defaults to today.")
@click.pass_context
def add_expense(ctx: click.Context, amount: float, category: str, description: str, when: str | None) -> None:
    """Record an expense."""

    data = ExpenseCreate(
        amount=amount,
        category=category,
        description=description,
        date=when or date.today().isoformat(),
    )
    expenses = _context(ctx).budget.add_expense(data)
    click.echo(f"Added expense {expenses[-1].id}")
    if not is_known_category(category):
        click.echo(f"Note: {category!r} is not a suggested category")


@cli.command("add-income")
@click.argument("amount", type=float)
@click.argument("source")
@click.option("-d", "--description", default="", help="Free-text note.")
@click.option("--date", "when", default=None, callback=_validate_date, help="YYYY-MM-DD, defaults to today.")
@click.option("--recurring", is_flag=True, default=False, help="Mark as recurring income.")
@click.pass_context
def add_income(
    ctx: click.Context,
    amount: float,
    source: str,
    description: str,
    when: str | None,
    recurring: bool,
) -> None:
    """Record income."""

    data = IncomeCreate(
        amount=amount,
        source=source,
        description=description,
        date=when or date.today().isoformat(),
        is_recurring=recurring,
    )
    incomes = _context(ctx).budget.add_income(data)
    click.echo(f"Added income {incomes[-1].id}")
    if not is_known_source(source):
        click.echo(f"Note: {source!r} is not a suggested income source")


@cli.command("add-goal")
@click.argument("category")
@click.argument("amount", type=float)
@click.argument("end_date", callback=_validate_date)
@click.pass_context
def add_goal(ctx: click.Context, category: str, amount: float, end_date: str) -> None:
    """Open a savings goal with a target AMOUNT due by END_DATE."""

    goals = _context(ctx).budget.add_goal(GoalCreate(category=category, amount=amount, end_date=end_date))
    click.echo(f"Added goal {goals[-1].id}")


@cli.command("progress")
@click.argument("goal_id")
@click.argument("delta", type=float)
@click.pass_context
def progress(ctx: click.Context, goal_id: str, delta: float) -> None:
    """Add DELTA to a goal's saved amount (use `-- -50` for a negative delta)."""

    budget = _context(ctx).budget
    if not any(g.id == goal_id for g in budget.goals):
        raise click.ClickException(f"No goal with id {goal_id}")
    goals = budget.update_goal_progress(goal_id, delta)
    goal = next(g for g in goals if g.id == goal_id)
    click.echo(
        f"{goal.category}: {goal.current_amount:.2f} / {goal.amount:.2f} "
        f"({summary.goal_progress_percentage(goal)}%)"
    )


@cli.command("remove")
@click.argument("kind", type=click.Choice(["expense", "income", "goal"]))
@click.argument("record_id")
@click.pass_context
def remove(ctx: click.Context, kind: str, record_id: str) -> None:
    """Delete a record by id. Unknown ids are ignored."""

    budget = _context(ctx).budget
    removers = {
        "expense": budget.remove_expense,
        "income": budget.remove_income,
        "goal": budget.remove_goal,
    }
    remaining = removers[kind](record_id)
    click.echo(f"{len(remaining)} {kind} record(s) remaining")


@cli.command("list")
@click.argument("kind", type=click.Choice(["expenses", "incomes", "goals"]))
@period_option
@click.pass_context
def list_records(ctx: click.Context, kind: str, period: str | None) -> None:
    """List stored records."""

    budget = _context(ctx).budget
    if kind == "expenses":
        rows = [e for e in budget.expenses if matches_period(e.date, period)]
        for e in rows:
            click.echo(f"{e.id}  {e.date}  {e.amount:>10.2f}  {e.category}  {e.description}")
    elif kind == "incomes":
        rows = [i for i in budget.incomes if matches_period(i.date, period)]
        for i in rows:
            flag = " (recurring)" if i.is_recurring else ""
            click.echo(f"{i.id}  {i.date}  {i.amount:>10.2f}  {i.source}{flag}  {i.description}")
    else:
        active, completed = summary.split_goals(budget.goals)
        for g in active + completed:
            status = "done" if summary.is_goal_completed(g) else f"{summary.days_remaining(g)}d left"
            click.echo(
                f"{g.id}  {g.category}  {g.current_amount:.2f}/{g.amount:.2f}  "
                f"{summary.goal_progress_percentage(g)}%  {status}"
            )


@cli.command("summary")
@period_option
@click.option("--this-month", is_flag=True, default=False, help="Shortcut for the current month.")
@click.pass_context
def show_summary(ctx: click.Context, period: str | None, this_month: bool) -> None:
    """Show income, expenses, balance and spending by category."""

    if this_month:
        if period is not None:
            raise click.UsageError("Use either --period or --this-month, not both.")
        period = current_month()
    budget = _context(ctx).budget
    month = summary.monthly_summary(budget, period)
    click.echo(f"Period:       {period or 'all time'}")
    click.echo(f"Income:       {month.income:.2f}")
    click.echo(f"Expenses:     {month.expenses:.2f}")
    click.echo(f"Balance:      {month.balance:.2f}")
    click.echo(f"Savings rate: {month.savings_rate}%")
    for share in summary.category_breakdown(budget, period):
        click.echo(f"  {share.category:<16} {share.amount:>10.2f}  {share.percentage:>3}%")


@cli.command("categories")
def categories() -> None:
    """Print the suggested expense categories and income sources."""

    click.echo("Expense categories: " + ", ".join(EXPENSE_CATEGORIES))
    click.echo("Income sources: " + ", ".join(INCOME_SOURCES))


def main() -> None:  # pragma: no cover - console entry point
    cli()
