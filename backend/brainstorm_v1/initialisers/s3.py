import logging, os, boto3

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID")
AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY")
AWS_REGION = os.getenv("AWS_REGION", None)
AWS_S3_BUCKET = os.getenv("AWS_S3_BUCKET")

def initialiseS3(app):
    logger.info(f"Setting up S3 client for bucket {AWS_S3_BUCKET} in region {AWS_REGION}...")
    try:
        app.state.s3 = boto3.client(
            "s3",
            region_name=AWS_REGION,
            aws_access_key_id=AWS_ACCESS_KEY_ID,
            aws_secret_access_key=AWS_SECRET_ACCESS_KEY
        )
    except Exception as e:
        logger.error(f"Failed to initialize S3 client: {e}")
        return False
    return True
