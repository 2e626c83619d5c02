"""
Crée (ou promeut) un compte administrateur.

    python scripts/create_admin.py admin@example.com 'motdepasse' --name "Admin"
"""

import argparse

from restaurant_api.core.config import settings
from restaurant_api.core.logging_config import setup_logging
from restaurant_api.db.seed import seed_admin
from restaurant_api.db.session import Session, engine, init_db


def main() -> None:
    parser = argparse.ArgumentParser(description="Créer un administrateur")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("--name", default=settings.ADMIN_NAME)
    args = parser.parse_args()

    setup_logging(settings.LOG_LEVEL)
    init_db()
    with Session(engine) as session:
        admin = seed_admin(session, email=args.email, password=args.password, name=args.name)
    if admin is None:
        raise SystemExit(f"Impossible de créer l'admin {args.email} (identifiants invalides ou email réservé par un compte supprimé)")
    print(f"Admin prêt : id={admin.id} email={admin.email}")


if __name__ == "__main__":
    main()
