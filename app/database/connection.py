import re
import motor.motor_asyncio
from beanie import init_beanie
from app.database.models import LoanApplication, OrganizationSubmission
from app.core import settings
import logging

# Set up logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Global database instance
database = None


def mask_mongo_uri(uri: str) -> str:
    """Hide credentials and path so a connection URI can be logged."""
    m = re.match(r'(?P<prefix>mongodb(?:\+srv)?://)(?:(?P<creds>[^@]+)@)?(?P<rest>.+)', uri or "")
    if not m:
        return "mongodb://<redacted>"
    host_part = m.group('rest').split('/')[0]
    return f"{m.group('prefix')}***@{host_part}"


async def init_db():
    global database
    try:
        mongodb_uri = settings.MONGODB_URI
        mongodb_db_name = settings.MONGODB_DB_NAME

        if not mongodb_uri:
            logger.error("MONGODB_URI is not set in environment variables")
            raise ValueError("MONGODB_URI is not set in environment variables")
        if not mongodb_db_name:
            logger.error("MONGODB_DB_NAME is not set in environment variables")
            raise ValueError("MONGODB_DB_NAME is not set in environment variables")

        logger.info(f"Attempting to connect to MongoDB at: {mask_mongo_uri(mongodb_uri)}")
        logger.info("Database name: %s", mongodb_db_name)

        client = motor.motor_asyncio.AsyncIOMotorClient(
            mongodb_uri,
            serverSelectionTimeoutMS=5000,
            socketTimeoutMS=45000,
            maxPoolSize=10,
            maxIdleTimeMS=30000,
            retryWrites=True,
            retryReads=True,
        )

        logger.info("Testing MongoDB connection...")
        await client.admin.command('ping')
        logger.info("Successfully connected to MongoDB!")

        database = client[mongodb_db_name]

        logger.info("Initializing Beanie with document models...")
        await init_beanie(database, document_models=[LoanApplication, OrganizationSubmission])
        logger.info("Beanie initialized successfully!")

        return database

    except ImportError as e:
        logger.error(f"Import error - missing dependency: {str(e)}")
        raise RuntimeError(f"Missing dependency: {str(e)}") from e
    except ValueError as e:
        logger.error(f"Configuration error: {str(e)}")
        raise RuntimeError(f"Configuration error: {str(e)}") from e
    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}")
        logger.error(f"Exception type: {type(e)}")
        raise


async def check_db_health() -> dict:
    if database is None:
        return {"status": "disconnected"}
    try:
        await database.client.admin.command('ping')
        return {"status": "connected", "database": database.name}
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {"status": "error", "error": str(e)}
