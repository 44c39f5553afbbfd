from urllib.parse import quote
import logging, os, time

from brainstorm_v1.helpers.errors import UploadError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

AWS_S3_BUCKET = os.getenv("AWS_S3_BUCKET")
AWS_REGION = os.getenv("AWS_REGION", None)

def makeResourceKey(unit_code, now_ms=None):
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{now_ms}_{unit_code}_resource.pdf"

def makeFileURI(key, bucket=None, region=None):
    bucket = bucket or AWS_S3_BUCKET
    region = region or AWS_REGION
    if region is None:
        return f"https://{bucket}.s3.amazonaws.com/{quote(key)}"
    return f"https://{bucket}.s3.{region}.amazonaws.com/{quote(key)}"

def uploadResourcePdf(s3, pdf_bytes, unit_code, bucket=None):
    bucket = bucket or AWS_S3_BUCKET
    key = makeResourceKey(unit_code)
    logger.info(f"Uploading resource PDF to s3://{bucket}/{key}")
    try:
        s3.put_object(
            Bucket=bucket,
            Key=key,
            Body=pdf_bytes,
            ContentType="application/pdf"
        )
    except Exception as e:
        raise UploadError(f"Failed to upload {key} to bucket {bucket}") from e

    return makeFileURI(key, bucket)
