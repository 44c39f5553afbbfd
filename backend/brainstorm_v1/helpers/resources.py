import psycopg2, logging
from datetime import datetime, timezone

from brainstorm_v1.helpers.errors import PersistError
from brainstorm_v1.helpers.models import ResourceRecord
from pydantic import ValidationError

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def checkResourcesTableExists(conn):
    logger.info("Checking Resources Table...")
    cur = conn.cursor()
    try:
        check_table_query = """
            SELECT EXISTS (
                SELECT 1
                FROM   pg_tables
                WHERE  schemaname = 'public'
                AND    tablename = 'resources'
            );
            """
        cur.execute(check_table_query)

        result = cur.fetchone()
        logger.debug(f"Query Result: {result}")

        if not result or len(result) == 0:
            logger.error("Unexpected query result format.")
            return False

        table_exists = result[0]

        if not table_exists:
            logger.info("Resources Table doesn't exist")
            return False
    except Exception as e:
        conn.rollback()
        logger.error(f"Error checking Resources Table: {e}")
        return False
    finally:
        cur.close()

    logger.info("Resources Table does exist")
    return True

def createDefaultResourcesTable(conn):
    logger.info("Creating Resources Table...")
    cur = conn.cursor()
    try:
        create_table_query = """
            CREATE TABLE Resources (
                ResourceID SERIAL PRIMARY KEY,
                FileURI TEXT NOT NULL,
                ProgramCode VARCHAR(50),
                IsCommonUnit BOOLEAN,
                UnitCode TEXT,
                UnitName TEXT,
                Semester INTEGER,
                Year INTEGER,
                ResourceDate TIMESTAMP WITH TIME ZONE,
                IsProfessorEndorsed BOOLEAN,
                IsExam BOOLEAN,
                IsNotes BOOLEAN,
                UnitProfessor TEXT
            );
        """

        cur.execute(create_table_query)

        conn.commit()

        logger.info("Created Default Resources Table successfully")
    except psycopg2.errors.DuplicateTable as e:
        conn.rollback()
        logger.warning(f"Table 'Resources' already exists: {e}")
    except Exception as e:
        conn.rollback()
        logger.error(f"An error occurred when creating Resources Table: {e}")
        return False
    finally:
        cur.close()

    return True

def initialiseResourcesTable(conn):
    logger.info("Initialising Resources Table...")

    if checkResourcesTableExists(conn):
        logger.info("Resources table already exists. Skipping creation.")
        return True

    logger.info("Creating Default Resources table since it doesn't exist.")
    return createDefaultResourcesTable(conn)

def createResource(pool, file_uri, unit_code, unit_name, is_notes):
    logger.info(f"Saving resource record for unit {unit_code} at {file_uri}")

    if pool is None:
        raise PersistError("No PostgreSQL connection pool available")

    try:
        record = ResourceRecord(
            fileURI=file_uri,
            unitCode=unit_code,
            unitName=unit_name,
            isNotes=is_notes,
            resourceDate=datetime.now(timezone.utc)
        )
    except ValidationError as e:
        raise PersistError(f"Resource record for unit {unit_code} failed validation") from e

    try:
        conn = pool.getconn()
    except Exception as e:
        raise PersistError("Failed to get a PostgreSQL connection from the pool") from e

    try:
        cur = conn.cursor()
        try:
            query = """
                INSERT INTO Resources (FileURI, UnitCode, UnitName, IsNotes, ResourceDate)
                VALUES (%s, %s, %s, %s, %s)
                RETURNING ResourceID;
            """

            cur.execute(query, (
                record.fileURI,
                record.unitCode,
                record.unitName,
                record.isNotes,
                record.resourceDate
            ))
            resource_id = cur.fetchone()[0]

            conn.commit()
        finally:
            cur.close()
    except Exception as e:
        if not conn.closed:
            conn.rollback()
        raise PersistError(f"Failed to insert resource record for {file_uri}") from e
    finally:
        # Broken connections are discarded so the pool opens a fresh one
        pool.putconn(conn, close=bool(conn.closed))

    logger.info(f"Resource record {resource_id} created for unit {record.unitCode}")

    return record.model_copy(update={"id": resource_id})
