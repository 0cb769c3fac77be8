"""
Signed JSON-over-HTTPS transport for AWS JSON 1.1 protocol services.
"""
import json
import boto3
import requests
from typing import Any, Dict, Optional, Type, TypeVar
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from botocore.exceptions import BotoCoreError
from logger_config import get_logger
from models import WireModel
from utils.exceptions import SupportAPIError

logger = get_logger(__name__)

R = TypeVar('R', bound=WireModel)


def check_key_pair(key: Optional[str], secret: Optional[str]) -> None:
    """Reject a half-configured static key pair."""
    if bool(key) != bool(secret):
        missing = 'secret' if key else 'key'
        raise ValueError(
            f'AWS access key id and secret access key must be given together (missing {missing})'
        )


class JSONClient:
    """Client that signs, sends and decodes JSON protocol calls."""

    def __init__(
        self,
        region: str,
        endpoint: str,
        prefix: str,
        target_prefix: str,
        json_version: str = '1.1',
        key: Optional[str] = None,
        secret: Optional[str] = None,
        session_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: int = 30
    ) -> None:
        """
        Initialize JSON client.

        Args:
            region: AWS region used for signing
            endpoint: Base URL of the service, without trailing slash
            prefix: Signing name of the service (e.g. 'support')
            target_prefix: X-Amz-Target prefix (e.g. 'AWSSupport_20130415')
            json_version: JSON protocol version for the Content-Type header
            key: AWS access key id; the default boto3 chain is used when omitted
            secret: AWS secret access key
            session_token: Optional STS session token
            session: Optional HTTP session to reuse connections from
            timeout: Request timeout in seconds

        Raises:
            ValueError: If only one of key and secret is given
        """
        check_key_pair(key, secret)
        self.region = region
        self.endpoint = endpoint.rstrip('/')
        self.prefix = prefix
        self.target_prefix = target_prefix
        self.json_version = json_version
        self.timeout = timeout
        self._key = key
        self._secret = secret
        self._session_token = session_token
        self._session = session
        self._credentials = None

    @property
    def session(self) -> requests.Session:
        """Lazy initialization of HTTP session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    @property
    def credentials(self):
        """Lazy resolution of signing credentials."""
        if self._credentials is None:
            if self._key and self._secret:
                self._credentials = Credentials(self._key, self._secret, self._session_token)
            else:
                self._credentials = boto3.Session(region_name=self.region).get_credentials()
        return self._credentials

    def _signed_headers(self, method: str, url: str, body: bytes, action: str) -> Dict[str, str]:
        aws_request = AWSRequest(
            method=method,
            url=url,
            data=body,
            headers={
                'Content-Type': f'application/x-amz-json-{self.json_version}',
                'X-Amz-Target': f'{self.target_prefix}.{action}',
            }
        )
        SigV4Auth(self.credentials, self.prefix, self.region).add_auth(aws_request)
        return dict(aws_request.headers.items())

    def do(
        self,
        action: str,
        method: str,
        path: str,
        request: WireModel,
        response_type: Type[R]
    ) -> R:
        """
        Perform one signed call and decode its response.

        Args:
            action: Operation name sent in X-Amz-Target
            method: HTTP verb
            path: Request path appended to the endpoint
            request: Typed request shape
            response_type: Shape class to decode the response body into

        Returns:
            Decoded response shape

        Raises:
            SupportAPIError: If signing, transport, the service or decoding fails
        """
        url = f'{self.endpoint}{path}'
        body = json.dumps(request.to_dict()).encode('utf-8')

        try:
            headers = self._signed_headers(method, url, body, action)
        except BotoCoreError as e:
            logger.error(f'Failed to sign {action} request: {str(e)}')
            raise SupportAPIError(
                f'Failed to sign {action} request: {str(e)}', operation=action
            ) from e

        try:
            response = self.session.request(
                method, url, data=body, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f'{action} request failed: {str(e)}')
            raise SupportAPIError(f'{action} request failed: {str(e)}', operation=action) from e

        request_id = response.headers.get('x-amzn-RequestId')

        if not response.ok:
            raise self._api_error(action, response, request_id)

        try:
            data = response.json() if response.content else {}
            result = response_type.from_dict(data)
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f'Failed to decode {action} response: {str(e)}')
            raise SupportAPIError(
                f'Failed to decode {action} response: {str(e)}',
                operation=action,
                status_code=response.status_code,
                request_id=request_id
            ) from e

        logger.info(f'{action} succeeded (request id: {request_id})')
        return result

    @staticmethod
    def _api_error(action: str, response: requests.Response, request_id: Optional[str]) -> SupportAPIError:
        try:
            data: Any = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}

        # '__type' looks like 'com.amazonaws.support#CaseIdNotFound'
        error_type = (data.get('__type') or '').rsplit('#', 1)[-1] or None
        message = data.get('message') or data.get('Message') or response.reason or 'unknown error'

        logger.error(
            f'{action} failed with HTTP {response.status_code}: {error_type}: {message} '
            f'(request id: {request_id})'
        )
        return SupportAPIError(
            f'{action} failed: {error_type or response.status_code}: {message}',
            operation=action,
            status_code=response.status_code,
            error_type=error_type,
            request_id=request_id,
            response_data=data or None
        )
