"""Command-line demo driver for the OOP cheatsheet.

Runs the lifecycle sequences of the owned matrix and of the people hierarchy
and prints what happens at every step.

    oop-cheatsheet matrix --size 3 --fill 0
    oop-cheatsheet people
    oop-cheatsheet all
"""

import copy
from typing import Optional

import click

from src.core.buffers import InvalidArgument, OutOfRange, OwnedMatrix, format_matrix
from src.core.config import DEFAULT_FILL, LOG_LEVEL_CHOICES
from src.core.domain import (
    Person,
    Student,
    Teacher,
    TeachingAssistant,
    reveal_salary,
    static_person,
)
from src.core.logging_config import configure_logging, get_logger

log = get_logger(__name__)


def _section(title: str) -> None:
    click.echo(f"\n--- {title} ---")


def _show(label: str, matrix: OwnedMatrix) -> None:
    click.echo(f"{label} ({matrix.size}x{matrix.size}):")
    click.echo(format_matrix(matrix))


def run_matrix_demo(size: int, fill: int) -> None:
    """Construct, copy, assign, index and release owned matrices."""
    _section("Construction")
    original = OwnedMatrix(size, fill=fill)
    if size > 0:
        center = size // 2
        original[center, center] = 42
    _show("original", original)

    _section("Copy Construction")
    clone = OwnedMatrix.copy_of(original)
    if size > 0:
        clone[0, 0] = 85
    _show("clone (after clone[0, 0] = 85)", clone)
    _show("original (unchanged)", original)

    _section("Assignment")
    target = OwnedMatrix(2, fill=1)
    source = OwnedMatrix(4, fill=9)
    target.assign_from(source)
    _show("target after assign_from(4x4 of 9)", target)
    target.assign_from(target)
    click.echo(f"self-assignment keeps target equal to source: {target == source}")

    _section("Bounds Checking")
    try:
        original.get(-1, 0)
    except OutOfRange as e:
        click.echo(f"OutOfRange: {e}")
    try:
        OwnedMatrix(-1)
    except InvalidArgument as e:
        click.echo(f"InvalidArgument: {e}")

    _section("Release")
    with OwnedMatrix(3, fill=fill) as scoped:
        click.echo(f"inside scope: {scoped!r}")
    click.echo(f"after scope: {scoped!r}")
    for matrix in (original, clone, target, source):
        matrix.release()
        matrix.release()
    click.echo(f"released twice: {original!r}")


def run_people_demo() -> None:
    """Walk through the people hierarchy the way a lecture would."""
    _section("Object Creation")
    default_person = Person()
    alice = Person(25, "Alice", 101)
    alice_copy = copy.copy(alice)
    click.echo(default_person.introduce())
    click.echo(alice.introduce())
    click.echo(f"copy of Alice: {alice_copy.introduce()}")

    _section("Student Example")
    bob = Student(20, "Bob", 1)
    click.echo(bob.introduce())
    bob_copy = copy.copy(bob)
    bob_copy.marks[0] = 85
    click.echo(f"Bob marks: {bob.marks}, copy marks: {bob_copy.marks}")
    bob.set_fees(1500)
    click.echo(f"Bob info: {bob.get_info()}")

    _section("Teacher Example")
    smith = Teacher(45, "Dr. Smith", 201, salary=70000, dept="Computer Science")
    click.echo(smith.introduce())
    click.echo(smith.get_info())
    click.echo(reveal_salary(smith))

    _section("TA Example")
    charlie = TeachingAssistant("Charlie", 23, 301, 35000)
    click.echo(charlie.introduce())
    click.echo(charlie.show_teacher_salary())
    click.echo(f"TA marks: {charlie.marks}")

    _section("Static Object Demo")
    click.echo(static_person().introduce())
    click.echo(f"same object on second call: {static_person() is static_person()}")

    _section("Vote Eligibility")
    verdict = "Yes" if alice.is_vote_eligible(True) else "No"
    click.echo(f"Is {alice.name} eligible to vote? {verdict}")

    click.echo(f"\nTotal Person objects: {Person.get_population()}")

    for person in (default_person, alice, bob, smith, charlie):
        person.retire()


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False),
    help="Logging level (DEBUG, INFO, WARNING, ...). Overrides OOP_CHEATSHEET_LOG_LEVEL.",
)
def cli(log_level: Optional[str]):
    """OOP cheatsheet demonstrations."""
    if log_level is not None:
        configure_logging(level=log_level)


@cli.command()
@click.option("--size", default=3, type=click.IntRange(min=0), help="Side length of the demo matrix.")
@click.option("--fill", default=DEFAULT_FILL, type=int, help="Initial value of every cell.")
def matrix(size: int, fill: int):
    """Owned matrix lifecycle: construct, copy, assign, release."""
    log.info("Running matrix demo (size=%d, fill=%d)", size, fill)
    run_matrix_demo(size, fill)


@cli.command()
def people():
    """Constructors, inheritance, virtual dispatch, friends and statics."""
    log.info("Running people demo")
    run_people_demo()


@cli.command(name="all")
@click.pass_context
def all_demos(ctx: click.Context):
    """Run every demo in sequence."""
    ctx.invoke(matrix)
    ctx.invoke(people)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
