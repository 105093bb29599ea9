"""
Flask CLI commands for bootstrapping a deployment

Usage:
    flask --app app create-admin --username admin --email admin@pujapath.com
    flask --app app seed-puja-types          # Adds the starter catalog (skips if not empty)
"""

import click
from flask import current_app
from flask.cli import with_appcontext

from database import db
from errors import DuplicateEntity
from models import PujaType
from schemas import StaffRegistration
from services import StaffAuthService

PUJA_TYPES_DATA = [
    {
        "name": "Ganesh Puja",
        "price": 500,
        "duration": "1-2 hours",
        "description": "Invocation of Lord Ganesha before any new beginning",
        "benefits": "Removes obstacles, brings wisdom and success",
        "required_items": "Modak, durva grass, red flowers, coconut",
    },
    {
        "name": "Satyanarayan Katha",
        "price": 1100,
        "duration": "2-3 hours",
        "description": "Recitation of the Satyanarayan Katha with puja and aarti",
        "benefits": "Peace and prosperity for the household",
        "required_items": "Panchamrit, banana leaves, prasad ingredients",
    },
    {
        "name": "Griha Pravesh",
        "price": 2100,
        "duration": "3-4 hours",
        "description": "Housewarming ceremony with vastu shanti and havan",
        "benefits": "Purifies the new home and invites positive energy",
        "required_items": "Kalash, mango leaves, havan samagri, ghee",
    },
    {
        "name": "Rudrabhishek",
        "price": 1500,
        "duration": "2-3 hours",
        "description": "Sacred abhishek of Lord Shiva with holy ingredients",
        "benefits": "Removes obstacles, brings peace and prosperity",
        "required_items": "Milk, curd, honey, bel patra, gangajal",
    },
    {
        "name": "Lakshmi Puja",
        "price": 1100,
        "duration": "1-2 hours",
        "description": "Worship of Goddess Lakshmi, traditionally on Diwali",
        "benefits": "Wealth, abundance and well-being",
        "required_items": "Lotus flowers, coins, diyas, sweets",
    },
]


@click.command("create-admin")
@click.option("--username", default="admin", show_default=True)
@click.option("--email", required=True)
@click.password_option()
@with_appcontext
def create_admin_command(username, email, password):
    """Create an Admin staff user (run once per deployment)."""
    dto = StaffRegistration.from_payload(
        {"username": username, "email": email, "password": password, "role": "Admin"}
    )
    try:
        StaffAuthService(db.session, current_app.config).register(dto)
    except DuplicateEntity as exc:
        raise click.ClickException(exc.message)
    click.echo(f"Admin {username} created successfully!")


@click.command("seed-puja-types")
@with_appcontext
def seed_puja_types_command():
    """Seed the starter puja catalog."""
    existing_count = db.session.query(PujaType).count()
    if existing_count > 0:
        click.echo(f"Found {existing_count} existing puja types. Skipping seed to avoid duplicates.")
        return

    for data in PUJA_TYPES_DATA:
        puja_type = PujaType(**data)
        db.session.add(puja_type)
        click.echo(f"  Added: {puja_type.name}")

    db.session.commit()
    click.echo(f"\nSeeded {len(PUJA_TYPES_DATA)} puja types successfully!")


def register_commands(app):
    app.cli.add_command(create_admin_command)
    app.cli.add_command(seed_puja_types_command)
