"""Create the database tables and load the default data directly"""
from alumni_hub.config import settings
from alumni_hub.services.database import DatabaseService
from alumni_hub.services.seed import seed_default_data
from alumni_hub.utils.logger import get_logger

logger = get_logger(__name__)


def run_migration():
    """Create every table and seed an empty store"""
    db = DatabaseService(settings.DATABASE_URL, echo=settings.DB_ECHO)

    try:
        db.create_tables()
        if seed_default_data(db):
            print("Default data loaded")
        print("Migration completed successfully!")

        # Verify
        print(f"Users in store: {db.count_users()}")
    except Exception as e:
        logger.error(f"Migration failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    run_migration()
