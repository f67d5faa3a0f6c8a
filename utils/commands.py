"""
utils/commands.py
-----------------
Flask CLI commands for provisioning students and the teacher credential.
Run them with `flask --app app <command>`.
"""

import click
from flask.cli import with_appcontext

from models.password import Password
from models.users import User


@click.command("add-student")
@click.argument("roll_numbers", nargs=-1, required=True)
@with_appcontext
def add_student(roll_numbers):
    """Register one or more roll numbers."""
    for roll_number in roll_numbers:
        if User.create(roll_number) is None:
            click.echo(f"Skipped {roll_number}: already registered")
        else:
            click.echo(f"Added {roll_number}")


@click.command("remove-student")
@click.argument("roll_number")
@with_appcontext
def remove_student(roll_number):
    """Delete a registered roll number."""
    if User.delete(roll_number):
        click.echo(f"Removed {roll_number}")
    else:
        raise click.ClickException(f"{roll_number} is not registered")


@click.command("set-teacher-password")
@click.password_option(help="New shared teacher password.")
@with_appcontext
def set_teacher_password(password):
    """Replace the shared teacher password. Attendance is closed afterwards."""
    Password.set_password(password)
    click.echo("Teacher password updated")


@click.command("reset-attendance")
@with_appcontext
def reset_attendance():
    """Close attendance as if the teacher had logged out."""
    Password.close_attendance()
    click.echo("Attendance closed")


def register_commands(app):
    app.cli.add_command(add_student)
    app.cli.add_command(remove_student)
    app.cli.add_command(set_teacher_password)
    app.cli.add_command(reset_attendance)
