import psycopg2, psycopg2.pool, logging, os
from brainstorm_v1.helpers.resources import initialiseResourcesTable

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

RDS_DBNAME = os.getenv("RDS_DBNAME")
RDS_USER = os.getenv("RDS_USER")
RDS_PASSWORD = os.getenv("RDS_PASSWORD")
RDS_HOST = os.getenv("RDS_HOST")
RDS_PORT = os.getenv("RDS_PORT")
RDS_POOL_MIN = int(os.getenv("RDS_POOL_MIN", "1"))
RDS_POOL_MAX = int(os.getenv("RDS_POOL_MAX", "10"))

DROP_TABLES = os.getenv("DROP_TABLES", "False")

def _prepare_database(conn):
    logger.info("Verifying PostgreSQL connection...")
    cur = conn.cursor()
    cur.execute("SELECT version();")
    db_version = cur.fetchone()
    logger.info(f"PostgreSQL database version: {db_version}")
    cur.close()

    if DROP_TABLES == "True":
        try:
            drop_tables_sql = """
            DROP SCHEMA public CASCADE;
            CREATE SCHEMA public;
            """
            cur = conn.cursor()
            cur.execute(drop_tables_sql)
            conn.commit()
            cur.close()
            logger.info("Successfully dropped tables")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to drop tables: {e}")

    return initialiseResourcesTable(conn)

def initialisePostgreSQL(app):
    logger.info(f"Initialising PostgreSQL pool ({RDS_POOL_MIN}-{RDS_POOL_MAX} connections)...")
    try:
        pool = psycopg2.pool.ThreadedConnectionPool(
            RDS_POOL_MIN,
            RDS_POOL_MAX,
            dbname=RDS_DBNAME,
            user=RDS_USER,
            password=RDS_PASSWORD,
            host=RDS_HOST,
            port=RDS_PORT
        )
        app.state.postgresql_db = pool
        logger.info("Connected to PostgreSQL database.")
    except Exception as e:
        logger.error(f"Failed to connect to PostgreSQL: {e}")
        return False

    conn = None
    try:
        conn = pool.getconn()
        if not _prepare_database(conn):
            logger.error("Failed to initialise Resources table")
            return False
    except Exception as e:
        logger.error(f"Failed to prepare PostgreSQL database: {e}")
        return False
    finally:
        if conn is not None:
            pool.putconn(conn)

    logger.info("PostgreSQL and tables initialised successfully.")
    return True
