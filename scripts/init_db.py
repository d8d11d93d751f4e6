#!/usr/bin/env python3
"""
Initialize the database with a demo device
"""

import argparse
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from status_api.database.connection import init_database, database
from status_api.models.device import Device

def create_demo_device(device_key: str, name: str, location: str):
    """Create the tables and a demo device if it doesn't exist"""

    init_database(database)
    session = database.session()

    try:
        device = session.query(Device).filter(Device.device_key == device_key).first()
        if not device:
            device = Device(
                device_key=device_key,
                name=name,
                description="Demo device created by init_db.py",
                location=location
            )
            session.add(device)
            session.commit()
            session.refresh(device)
            print(f"✅ Demo device created with device_id={device.device_id}")
        else:
            print(f"Demo device already present with device_id={device.device_id}")

    except Exception as e:
        print(f"❌ Error initializing database: {e}")
        session.rollback()
        raise
    finally:
        session.close()
        database.dispose()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--device-key", default=os.getenv("DEMO_DEVICE_KEY", "demo-device-key"))
    parser.add_argument("--name", default="Demo sensor")
    parser.add_argument("--location", default="Lab")
    args = parser.parse_args()
    create_demo_device(args.device_key, args.name, args.location)
