"""
S3 Repository for the uploaded CSV file.
Keeps the single data file as one object in Amazon S3.
"""
from contextlib import closing
from typing import BinaryIO
import boto3
from botocore.exceptions import ClientError
from src.core import config
from src.core.exceptions import CSVProcessingException, PersistenceException
from src.core.logger import get_logger
from src.repositories.csv_repository import CsvRepository

logger = get_logger(__name__)


def _is_missing(error: ClientError) -> bool:
    return error.response.get('Error', {}).get('Code') in ('404', 'NoSuchKey', 'NotFound')


class S3CsvRepository(CsvRepository):
    """Repository for the CSV file slot stored in S3."""
    
    def __init__(self):
        self.s3_client = boto3.client('s3', region_name=config.settings.aws_region)
        self.bucket_name = config.settings.s3_bucket_name
        self.s3_key = f"{config.settings.s3_prefix}/{config.settings.csv_filename}"
    
    def save(self, file: BinaryIO) -> None:
        """
        Upload file to the fixed S3 key, replacing the previous object.
        
        Raises:
            PersistenceException: If upload fails
        """
        try:
            self.s3_client.upload_fileobj(
                file,
                self.bucket_name,
                self.s3_key,
                ExtraArgs={'ContentType': 'text/csv'}
            )
            logger.info("Stored CSV file at s3://%s/%s", self.bucket_name, self.s3_key)
        except ClientError as e:
            raise PersistenceException(f"Failed to upload file to S3: {str(e)}") from e
        except Exception as e:
            raise PersistenceException(f"Unexpected error during S3 upload: {str(e)}") from e
    
    def exists(self) -> bool:
        try:
            self.s3_client.head_object(Bucket=self.bucket_name, Key=self.s3_key)
            return True
        except ClientError as e:
            if _is_missing(e):
                return False
            raise CSVProcessingException(f"Failed to access file in S3: {str(e)}") from e
    
    def open(self):
        """
        Open the stored object as a streaming body.
        
        Raises:
            CSVProcessingException: If retrieval fails
        """
        try:
            response = self.s3_client.get_object(Bucket=self.bucket_name, Key=self.s3_key)
        except ClientError as e:
            raise CSVProcessingException(f"Failed to retrieve file from S3: {str(e)}") from e
        return closing(response['Body'])
