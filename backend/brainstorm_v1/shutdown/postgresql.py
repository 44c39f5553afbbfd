import logging

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def shutdownPostgreSQL(app):
    pool = getattr(app.state, "postgresql_db", None)
    if pool is None:
        logger.info("No PostgreSQL pool to close.")
        return True

    try:
        pool.closeall()

        logger.info("PostgreSQL pool closed successfully.")
        return True
    except Exception as e:
        logger.error(f"Failed to close PostgreSQL pool: {e}")
        return False
