"""
AWS Support service client.

Every method is a direct pass-through to the shared JSON client; case
workflows, validation of codes and Trusted Advisor semantics are all
enforced by the service itself.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, Union
import requests
from config import Config
from logger_config import get_logger
from models import (
    WireModel,
    AddAttachmentsToSetRequest, AddAttachmentsToSetResponse,
    AddCommunicationToCaseRequest, AddCommunicationToCaseResponse,
    CreateCaseRequest, CreateCaseResponse,
    DescribeAttachmentRequest, DescribeAttachmentResponse,
    DescribeCasesRequest, DescribeCasesResponse,
    DescribeCommunicationsRequest, DescribeCommunicationsResponse,
    DescribeServicesRequest, DescribeServicesResponse,
    DescribeSeverityLevelsRequest, DescribeSeverityLevelsResponse,
    DescribeTrustedAdvisorCheckRefreshStatusesRequest, DescribeTrustedAdvisorCheckRefreshStatusesResponse,
    DescribeTrustedAdvisorCheckResultRequest, DescribeTrustedAdvisorCheckResultResponse,
    DescribeTrustedAdvisorCheckSummariesRequest, DescribeTrustedAdvisorCheckSummariesResponse,
    DescribeTrustedAdvisorChecksRequest, DescribeTrustedAdvisorChecksResponse,
    RefreshTrustedAdvisorCheckRequest, RefreshTrustedAdvisorCheckResponse,
    ResolveCaseRequest, ResolveCaseResponse,
)
from .json_client import JSONClient, check_key_pair

logger = get_logger(__name__)

SIGNING_NAME = 'support'
TARGET_PREFIX = 'AWSSupport_20130415'
JSON_VERSION = '1.1'


@dataclass(frozen=True)
class Operation:
    """One row of the operation table."""
    name: str
    request_type: Type[WireModel]
    response_type: Type[WireModel]
    http_method: str = 'POST'
    path: str = '/'


OPERATIONS: Dict[str, Operation] = {
    op.name: op for op in (
        Operation('AddAttachmentsToSet', AddAttachmentsToSetRequest, AddAttachmentsToSetResponse),
        Operation('AddCommunicationToCase', AddCommunicationToCaseRequest, AddCommunicationToCaseResponse),
        Operation('CreateCase', CreateCaseRequest, CreateCaseResponse),
        Operation('DescribeAttachment', DescribeAttachmentRequest, DescribeAttachmentResponse),
        Operation('DescribeCases', DescribeCasesRequest, DescribeCasesResponse),
        Operation('DescribeCommunications', DescribeCommunicationsRequest, DescribeCommunicationsResponse),
        Operation('DescribeServices', DescribeServicesRequest, DescribeServicesResponse),
        Operation('DescribeSeverityLevels', DescribeSeverityLevelsRequest, DescribeSeverityLevelsResponse),
        Operation(
            'DescribeTrustedAdvisorCheckRefreshStatuses',
            DescribeTrustedAdvisorCheckRefreshStatusesRequest,
            DescribeTrustedAdvisorCheckRefreshStatusesResponse,
        ),
        Operation(
            'DescribeTrustedAdvisorCheckResult',
            DescribeTrustedAdvisorCheckResultRequest,
            DescribeTrustedAdvisorCheckResultResponse,
        ),
        Operation(
            'DescribeTrustedAdvisorCheckSummaries',
            DescribeTrustedAdvisorCheckSummariesRequest,
            DescribeTrustedAdvisorCheckSummariesResponse,
        ),
        Operation('DescribeTrustedAdvisorChecks', DescribeTrustedAdvisorChecksRequest, DescribeTrustedAdvisorChecksResponse),
        Operation('RefreshTrustedAdvisorCheck', RefreshTrustedAdvisorCheckRequest, RefreshTrustedAdvisorCheckResponse),
        Operation('ResolveCase', ResolveCaseRequest, ResolveCaseResponse),
    )
}


class SupportService:
    """Service for AWS Support API operations."""

    def __init__(
        self,
        key: Optional[str] = None,
        secret: Optional[str] = None,
        region: str = 'us-east-1',
        session: Optional[requests.Session] = None,
        endpoint: Optional[str] = None,
        session_token: Optional[str] = None,
        timeout: int = 30
    ) -> None:
        """
        Initialize Support service.

        Args:
            key: AWS access key id (default credential chain when omitted)
            secret: AWS secret access key
            region: AWS region for the endpoint and request signing
            session: Optional HTTP session
            endpoint: Endpoint override (defaults to https://support.<region>.amazonaws.com)
            session_token: Optional STS session token
            timeout: Request timeout in seconds

        Raises:
            ValueError: If only one of key and secret is given
        """
        check_key_pair(key, secret)
        self.region = region
        self.endpoint = endpoint or f'https://support.{region}.amazonaws.com'
        self._key = key
        self._secret = secret
        self._session_token = session_token
        self._session = session
        self._timeout = timeout
        self._client: Optional[JSONClient] = None

    @classmethod
    def from_config(
        cls,
        config: Config,
        key: Optional[str] = None,
        secret: Optional[str] = None
    ) -> 'SupportService':
        """Build a service from validated configuration, preferring explicit keys."""
        if not (key and secret):
            key, secret = config.aws_access_key_id, config.aws_secret_access_key
        # A session token only belongs to the key it was issued with
        session_token = config.aws_session_token if key == config.aws_access_key_id else None
        return cls(
            key=key,
            secret=secret,
            region=config.aws_region,
            endpoint=config.endpoint,
            session_token=session_token,
            timeout=config.request_timeout,
        )

    @property
    def client(self) -> JSONClient:
        """Lazy initialization of the JSON client."""
        if self._client is None:
            self._client = JSONClient(
                region=self.region,
                endpoint=self.endpoint,
                prefix=SIGNING_NAME,
                target_prefix=TARGET_PREFIX,
                json_version=JSON_VERSION,
                key=self._key,
                secret=self._secret,
                session_token=self._session_token,
                session=self._session,
                timeout=self._timeout,
            )
        return self._client

    def invoke(self, operation_name: str, request: Union[WireModel, Dict[str, Any], None] = None) -> WireModel:
        """
        Call an operation by its wire name.

        Args:
            operation_name: Operation name, e.g. 'DescribeCases'
            request: Typed request, a wire-format dict, or None for an empty request

        Returns:
            Typed response for the operation

        Raises:
            ValueError: If the operation is unknown or the request has the wrong shape
            SupportAPIError: If the call fails
        """
        op = OPERATIONS.get(operation_name)
        if op is None:
            raise ValueError(f'Unknown Support operation: {operation_name}')

        if request is None or isinstance(request, dict):
            request = op.request_type.from_dict(request or {})
        elif not isinstance(request, op.request_type):
            raise ValueError(
                f'{operation_name} expects {op.request_type.__name__}, got {type(request).__name__}'
            )

        return self.client.do(op.name, op.http_method, op.path, request, op.response_type)

    def add_attachments_to_set(self, request: AddAttachmentsToSetRequest) -> AddAttachmentsToSetResponse:
        """
        Add attachments to an attachment set, creating the set when no id is given.

        A set lives for one hour (see expiry_time in the response) and holds
        at most 3 attachments of up to 5 MB each.
        """
        return self.invoke('AddAttachmentsToSet', request)

    def add_communication_to_case(self, request: AddCommunicationToCaseRequest) -> AddCommunicationToCaseResponse:
        """Add customer communication, optionally with an attachment set, to a case."""
        return self.invoke('AddCommunicationToCase', request)

    def create_case(self, request: CreateCaseRequest) -> CreateCaseResponse:
        """
        Open a new support case.

        Service and category codes come from describe_services, severity codes
        from describe_severity_levels. The issue type defaults to technical
        on the service side.
        """
        return self.invoke('CreateCase', request)

    def describe_attachment(self, request: DescribeAttachmentRequest) -> DescribeAttachmentResponse:
        """Return the attachment with the given id."""
        return self.invoke('DescribeAttachment', request)

    def describe_cases(self, request: DescribeCasesRequest) -> DescribeCasesResponse:
        """Return cases by id and/or time window, one page at a time via next_token."""
        return self.invoke('DescribeCases', request)

    def describe_communications(self, request: DescribeCommunicationsRequest) -> DescribeCommunicationsResponse:
        """Return communications and attachment details for a case."""
        return self.invoke('DescribeCommunications', request)

    def describe_services(self, request: DescribeServicesRequest) -> DescribeServicesResponse:
        """Return services and their categories, for use in create_case."""
        return self.invoke('DescribeServices', request)

    def describe_severity_levels(self, request: DescribeSeverityLevelsRequest) -> DescribeSeverityLevelsResponse:
        return self.invoke('DescribeSeverityLevels', request)

    def describe_trusted_advisor_check_refresh_statuses(
        self,
        request: DescribeTrustedAdvisorCheckRefreshStatusesRequest
    ) -> DescribeTrustedAdvisorCheckRefreshStatusesResponse:
        return self.invoke('DescribeTrustedAdvisorCheckRefreshStatuses', request)

    def describe_trusted_advisor_check_result(
        self,
        request: DescribeTrustedAdvisorCheckResultRequest
    ) -> DescribeTrustedAdvisorCheckResultResponse:
        """Return the latest result of one Trusted Advisor check."""
        return self.invoke('DescribeTrustedAdvisorCheckResult', request)

    def describe_trusted_advisor_check_summaries(
        self,
        request: DescribeTrustedAdvisorCheckSummariesRequest
    ) -> DescribeTrustedAdvisorCheckSummariesResponse:
        return self.invoke('DescribeTrustedAdvisorCheckSummaries', request)

    def describe_trusted_advisor_checks(
        self,
        request: DescribeTrustedAdvisorChecksRequest
    ) -> DescribeTrustedAdvisorChecksResponse:
        """Return all available Trusted Advisor checks in the requested language."""
        return self.invoke('DescribeTrustedAdvisorChecks', request)

    def refresh_trusted_advisor_check(
        self,
        request: RefreshTrustedAdvisorCheckRequest
    ) -> RefreshTrustedAdvisorCheckResponse:
        """Enqueue a refresh of a Trusted Advisor check."""
        return self.invoke('RefreshTrustedAdvisorCheck', request)

    def resolve_case(self, request: ResolveCaseRequest) -> ResolveCaseResponse:
        """Resolve a case, returning its status before and after the call."""
        return self.invoke('ResolveCase', request)
