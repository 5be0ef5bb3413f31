"""Create one regional admin per zone for local development.

Usage: python scripts/seed_officials.py [password]
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import app
from civic.errors import ConflictError
from civic.models import Zone
from civic.services.officials import create_official

password = sys.argv[1] if len(sys.argv) > 1 else 'official123'

with app.app_context():
    for zone in Zone:
        if zone == Zone.UNASSIGNED:
            continue
        try:
            official = create_official({
                'name': f'{zone.name.title()} Zone Officer',
                'email': f'{zone.name.lower()}@civic.local',
                'password': password,
                'zone': zone.name,
            })
            print(f'Created {official.email} for zone {zone.name}')
        except ConflictError as e:
            print(f'Skipped zone {zone.name}: {e.message}')
