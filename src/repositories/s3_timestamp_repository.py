"""
S3 Repository for the last-update timestamp.
Stores the same {"timestamp": ...} document as the local JSON file.
"""
import json
from typing import Optional
import boto3
from botocore.exceptions import ClientError
from src.core import config
from src.core.exceptions import PersistenceException
from src.repositories.s3_repository import _is_missing
from src.repositories.timestamp_repository import TimestampRepository


class S3TimestampRepository(TimestampRepository):
    """Repository for the update timestamp stored as an S3 object."""
    
    def __init__(self):
        self.s3_client = boto3.client('s3', region_name=config.settings.aws_region)
        self.bucket_name = config.settings.s3_bucket_name
        self.s3_key = f"{config.settings.s3_prefix}/{config.settings.last_update_filename}"
    
    def load(self) -> Optional[str]:
        try:
            response = self.s3_client.get_object(Bucket=self.bucket_name, Key=self.s3_key)
        except ClientError as e:
            if _is_missing(e):
                return None
            raise
        
        document = json.loads(response['Body'].read())
        timestamp = document.get('timestamp') if isinstance(document, dict) else None
        if not isinstance(timestamp, str):
            raise ValueError(f"No timestamp in s3://{self.bucket_name}/{self.s3_key}")
        return timestamp
    
    def store(self, timestamp: str) -> None:
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=self.s3_key,
                Body=json.dumps({'timestamp': timestamp}).encode('utf-8'),
                ContentType='application/json'
            )
        except ClientError as e:
            raise PersistenceException(f"Failed to write update timestamp to S3: {str(e)}") from e
