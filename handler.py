"""
Lambda handler exposing the AWS Support operation table.

Events name an operation and carry its request in wire format:

    {"operation": "DescribeCases", "request": {"includeResolvedCases": true}}
"""
import json
import boto3
from typing import Optional, Tuple
from logger_config import get_logger
from config import get_config
from services.support_service import SupportService
from utils.decorators import lambda_handler

logger = get_logger(__name__)


def get_support_credentials() -> Tuple[Optional[str], Optional[str]]:
    """
    Retrieve Support API credentials from Secrets Manager with fallback
    to environment variables.

    Returns:
        Tuple of (access_key_id, secret_access_key), or (None, None) to let
        the default boto3 credential chain sign requests.
    """
    config = get_config()

    if config.support_secret_name:
        try:
            secrets_client = boto3.client(
                'secretsmanager', region_name=config.aws_region
            )
            response = secrets_client.get_secret_value(
                SecretId=config.support_secret_name
            )
            secret_data = json.loads(response['SecretString'])

            key = secret_data.get('aws_access_key_id')
            secret = secret_data.get('aws_secret_access_key')

            if key and secret:
                logger.info(
                    f'Retrieved Support credentials from Secrets Manager: '
                    f'{config.support_secret_name}'
                )
                return key, secret
            logger.warning(
                f'Secrets Manager secret {config.support_secret_name} is missing '
                f'aws_access_key_id/aws_secret_access_key, falling back to env vars'
            )
        except Exception as e:
            logger.warning(
                f'Failed to retrieve credentials from Secrets Manager '
                f'({config.support_secret_name}): {str(e)}. '
                f'Falling back to environment variables.'
            )

    if config.aws_access_key_id and config.aws_secret_access_key:
        logger.info('Using Support credentials from environment variables')
        return config.aws_access_key_id, config.aws_secret_access_key

    logger.info('No explicit Support credentials, using the default credential chain')
    return None, None


@lambda_handler
def invoke_support_operation(event, context):
    """Run one Support operation named in the event and return its wire response."""
    if not isinstance(event, dict):
        raise ValueError('Event must be an object with an "operation" key')

    operation = event.get('operation')
    if not operation:
        raise ValueError('Event is missing "operation"')

    request = event.get('request') or {}
    if not isinstance(request, dict):
        raise ValueError('"request" must be an object')

    key, secret = get_support_credentials()
    service = SupportService.from_config(get_config(), key=key, secret=secret)

    response = service.invoke(operation, request)
    return response.to_dict()
