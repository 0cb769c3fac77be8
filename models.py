"""
Typed request/response shapes for the AWS Support JSON API.

Each shape is a dataclass whose fields carry their camelCase wire name.
Optional fields are dropped from the payload when empty; required fields
are always sent.
"""
import base64
import binascii
import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

T = TypeVar('T', bound='WireModel')


class IssueType(str, Enum):
    CUSTOMER_SERVICE = 'customer-service'
    TECHNICAL = 'technical'


class SeverityCode(str, Enum):
    LOW = 'low'
    NORMAL = 'normal'
    HIGH = 'high'
    URGENT = 'urgent'
    CRITICAL = 'critical'


class CaseStatus(str, Enum):
    OPENED = 'opened'
    PENDING_CUSTOMER_ACTION = 'pending-customer-action'
    REOPENED = 'reopened'
    RESOLVED = 'resolved'
    UNASSIGNED = 'unassigned'
    WORK_IN_PROGRESS = 'work-in-progress'
    ALL_OPEN = 'all-open'


class CheckStatus(str, Enum):
    """Alert status of a Trusted Advisor check or flagged resource."""
    OK = 'ok'
    WARNING = 'warning'
    ERROR = 'error'
    NOT_AVAILABLE = 'not_available'


class RefreshStatus(str, Enum):
    NONE = 'none'
    ENQUEUED = 'enqueued'
    PROCESSING = 'processing'
    SUCCESS = 'success'
    ABANDONED = 'abandoned'


def wire(name: str, required: bool = False, default: Any = None, default_factory: Any = None) -> Any:
    """
    Declare a dataclass field bound to a JSON wire name.

    Args:
        name: Exact JSON key used by the service
        required: Always serialize the field, even when empty
        default: Default value when the key is absent
        default_factory: Factory for mutable defaults (lists, nested shapes)
    """
    metadata = {'wire_name': name, 'required': required}
    if default_factory is not None:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Enum):
        return False
    if isinstance(value, (str, bytes, list, dict)):
        return len(value) == 0
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    return False


def _encode(value: Any) -> Any:
    if isinstance(value, WireModel):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bytes):
        return base64.b64encode(value).decode('ascii')
    if isinstance(value, list):
        return [_encode(item) for item in value]
    return value


def _decode(tp: Any, value: Any) -> Any:
    if value is None:
        return None

    origin = get_origin(tp)
    if origin is Union:
        inner = [arg for arg in get_args(tp) if arg is not type(None)]
        return _decode(inner[0], value)
    if origin in (list, List):
        (item_type,) = get_args(tp)
        if not isinstance(value, list):
            raise ValueError(f'Expected a list, got {type(value).__name__}')
        return [_decode(item_type, item) for item in value]

    if isinstance(tp, type) and issubclass(tp, WireModel):
        if not isinstance(value, dict):
            raise ValueError(f'Expected an object for {tp.__name__}, got {type(value).__name__}')
        return tp.from_dict(value)
    if isinstance(tp, type) and issubclass(tp, Enum):
        if not isinstance(value, str):
            raise ValueError(f'Expected a string for {tp.__name__}, got {type(value).__name__}')
        # Raises ValueError for values outside the closed vocabulary
        return tp(value)
    if tp is bytes:
        if not isinstance(value, str):
            raise ValueError(f'Expected a base64 string, got {type(value).__name__}')
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise ValueError(f'Invalid base64 data: {str(e)}') from e
    if tp is bool:
        if not isinstance(value, bool):
            raise ValueError(f'Expected a boolean, got {type(value).__name__}')
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f'Expected an integer, got {type(value).__name__}')
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f'Expected a number, got {type(value).__name__}')
        return float(value)
    if tp is str:
        if not isinstance(value, str):
            raise ValueError(f'Expected a string, got {type(value).__name__}')
        return value
    return value


class WireModel:
    """Mixin giving dataclass shapes their JSON wire encoding."""

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the wire dictionary.

        Returns:
            Dictionary keyed by wire names, optional empty fields omitted
        """
        data: Dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if not f.metadata.get('required') and _is_empty(value):
                continue
            data[f.metadata['wire_name']] = _encode(value)
        return data

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Dict[str, Any]]) -> T:
        """
        Build an instance from a wire dictionary.

        Unknown keys are ignored; missing or null keys keep the field default.

        Raises:
            ValueError: If a value does not match its declared type or vocabulary
        """
        hints = get_type_hints(cls)
        kwargs = {}
        for f in dataclasses.fields(cls):
            value = (data or {}).get(f.metadata['wire_name'])
            if value is None:
                continue
            kwargs[f.name] = _decode(hints[f.name], value)
        return cls(**kwargs)


# Shared records

@dataclass
class Attachment(WireModel):
    data: Optional[bytes] = wire('data')
    file_name: Optional[str] = wire('fileName')


@dataclass
class AttachmentDetails(WireModel):
    attachment_id: Optional[str] = wire('attachmentId')
    file_name: Optional[str] = wire('fileName')


@dataclass
class Category(WireModel):
    code: Optional[str] = wire('code')
    name: Optional[str] = wire('name')


@dataclass
class SeverityLevel(WireModel):
    code: Optional[SeverityCode] = wire('code')
    name: Optional[str] = wire('name')


@dataclass
class Service(WireModel):
    categories: List[Category] = wire('categories', default_factory=list)
    code: Optional[str] = wire('code')
    name: Optional[str] = wire('name')


@dataclass
class Communication(WireModel):
    """A single append-only entry on a case."""
    attachment_set: List[AttachmentDetails] = wire('attachmentSet', default_factory=list)
    body: Optional[str] = wire('body')
    case_id: Optional[str] = wire('caseId')
    submitted_by: Optional[str] = wire('submittedBy')
    time_created: Optional[str] = wire('timeCreated')


@dataclass
class RecentCaseCommunications(WireModel):
    communications: List[Communication] = wire('communications', default_factory=list)
    next_token: Optional[str] = wire('nextToken')


@dataclass
class CaseDetails(WireModel):
    case_id: Optional[str] = wire('caseId')
    category_code: Optional[str] = wire('categoryCode')
    cc_email_addresses: List[str] = wire('ccEmailAddresses', default_factory=list)
    display_id: Optional[str] = wire('displayId')
    language: Optional[str] = wire('language')
    recent_communications: Optional[RecentCaseCommunications] = wire('recentCommunications')
    service_code: Optional[str] = wire('serviceCode')
    severity_code: Optional[SeverityCode] = wire('severityCode')
    status: Optional[CaseStatus] = wire('status')
    subject: Optional[str] = wire('subject')
    submitted_by: Optional[str] = wire('submittedBy')
    time_created: Optional[str] = wire('timeCreated')


# Trusted Advisor records

@dataclass
class TrustedAdvisorCheckDescription(WireModel):
    category: str = wire('category', required=True, default='')
    description: str = wire('description', required=True, default='')
    id: str = wire('id', required=True, default='')
    metadata: List[str] = wire('metadata', required=True, default_factory=list)
    name: str = wire('name', required=True, default='')


@dataclass
class TrustedAdvisorCheckRefreshStatus(WireModel):
    check_id: str = wire('checkId', required=True, default='')
    millis_until_next_refreshable: int = wire('millisUntilNextRefreshable', required=True, default=0)
    status: RefreshStatus = wire('status', required=True, default=RefreshStatus.NONE)


@dataclass
class TrustedAdvisorCostOptimizingSummary(WireModel):
    estimated_monthly_savings: float = wire('estimatedMonthlySavings', required=True, default=0.0)
    estimated_percent_monthly_savings: float = wire('estimatedPercentMonthlySavings', required=True, default=0.0)


@dataclass
class TrustedAdvisorCategorySpecificSummary(WireModel):
    cost_optimizing: Optional[TrustedAdvisorCostOptimizingSummary] = wire('costOptimizing')


@dataclass
class TrustedAdvisorResourceDetail(WireModel):
    is_suppressed: bool = wire('isSuppressed', default=False)
    metadata: List[str] = wire('metadata', required=True, default_factory=list)
    region: str = wire('region', required=True, default='')
    resource_id: str = wire('resourceId', required=True, default='')
    status: CheckStatus = wire('status', required=True, default=CheckStatus.OK)


@dataclass
class TrustedAdvisorResourcesSummary(WireModel):
    resources_flagged: int = wire('resourcesFlagged', required=True, default=0)
    resources_ignored: int = wire('resourcesIgnored', required=True, default=0)
    resources_processed: int = wire('resourcesProcessed', required=True, default=0)
    resources_suppressed: int = wire('resourcesSuppressed', required=True, default=0)


@dataclass
class TrustedAdvisorCheckResult(WireModel):
    category_specific_summary: TrustedAdvisorCategorySpecificSummary = wire(
        'categorySpecificSummary', required=True, default_factory=TrustedAdvisorCategorySpecificSummary)
    check_id: str = wire('checkId', required=True, default='')
    flagged_resources: List[TrustedAdvisorResourceDetail] = wire(
        'flaggedResources', required=True, default_factory=list)
    resources_summary: TrustedAdvisorResourcesSummary = wire(
        'resourcesSummary', required=True, default_factory=TrustedAdvisorResourcesSummary)
    status: CheckStatus = wire('status', required=True, default=CheckStatus.NOT_AVAILABLE)
    timestamp: str = wire('timestamp', required=True, default='')


@dataclass
class TrustedAdvisorCheckSummary(WireModel):
    category_specific_summary: TrustedAdvisorCategorySpecificSummary = wire(
        'categorySpecificSummary', required=True, default_factory=TrustedAdvisorCategorySpecificSummary)
    check_id: str = wire('checkId', required=True, default='')
    has_flagged_resources: bool = wire('hasFlaggedResources', default=False)
    resources_summary: TrustedAdvisorResourcesSummary = wire(
        'resourcesSummary', required=True, default_factory=TrustedAdvisorResourcesSummary)
    status: CheckStatus = wire('status', required=True, default=CheckStatus.NOT_AVAILABLE)
    timestamp: str = wire('timestamp', required=True, default='')


# Operation requests and responses

@dataclass
class AddAttachmentsToSetRequest(WireModel):
    attachments: List[Attachment] = wire('attachments', required=True, default_factory=list)
    attachment_set_id: Optional[str] = wire('attachmentSetId')


@dataclass
class AddAttachmentsToSetResponse(WireModel):
    attachment_set_id: Optional[str] = wire('attachmentSetId')
    expiry_time: Optional[str] = wire('expiryTime')


@dataclass
class AddCommunicationToCaseRequest(WireModel):
    communication_body: str = wire('communicationBody', required=True, default='')
    attachment_set_id: Optional[str] = wire('attachmentSetId')
    case_id: Optional[str] = wire('caseId')
    cc_email_addresses: List[str] = wire('ccEmailAddresses', default_factory=list)


@dataclass
class AddCommunicationToCaseResponse(WireModel):
    result: bool = wire('result', default=False)


@dataclass
class CreateCaseRequest(WireModel):
    subject: str = wire('subject', required=True, default='')
    communication_body: str = wire('communicationBody', required=True, default='')
    attachment_set_id: Optional[str] = wire('attachmentSetId')
    category_code: Optional[str] = wire('categoryCode')
    cc_email_addresses: List[str] = wire('ccEmailAddresses', default_factory=list)
    issue_type: Optional[IssueType] = wire('issueType')
    language: Optional[str] = wire('language')
    service_code: Optional[str] = wire('serviceCode')
    severity_code: Optional[SeverityCode] = wire('severityCode')


@dataclass
class CreateCaseResponse(WireModel):
    case_id: Optional[str] = wire('caseId')


@dataclass
class DescribeAttachmentRequest(WireModel):
    attachment_id: str = wire('attachmentId', required=True, default='')


@dataclass
class DescribeAttachmentResponse(WireModel):
    attachment: Optional[Attachment] = wire('attachment')


@dataclass
class DescribeCasesRequest(WireModel):
    after_time: Optional[str] = wire('afterTime')
    before_time: Optional[str] = wire('beforeTime')
    case_id_list: List[str] = wire('caseIdList', default_factory=list)
    display_id: Optional[str] = wire('displayId')
    include_communications: bool = wire('includeCommunications', default=False)
    include_resolved_cases: bool = wire('includeResolvedCases', default=False)
    language: Optional[str] = wire('language')
    max_results: Optional[int] = wire('maxResults')
    next_token: Optional[str] = wire('nextToken')


@dataclass
class DescribeCasesResponse(WireModel):
    cases: List[CaseDetails] = wire('cases', default_factory=list)
    next_token: Optional[str] = wire('nextToken')


@dataclass
class DescribeCommunicationsRequest(WireModel):
    case_id: str = wire('caseId', required=True, default='')
    after_time: Optional[str] = wire('afterTime')
    before_time: Optional[str] = wire('beforeTime')
    max_results: Optional[int] = wire('maxResults')
    next_token: Optional[str] = wire('nextToken')


@dataclass
class DescribeCommunicationsResponse(WireModel):
    communications: List[Communication] = wire('communications', default_factory=list)
    next_token: Optional[str] = wire('nextToken')


@dataclass
class DescribeServicesRequest(WireModel):
    language: Optional[str] = wire('language')
    service_code_list: List[str] = wire('serviceCodeList', default_factory=list)


@dataclass
class DescribeServicesResponse(WireModel):
    services: List[Service] = wire('services', default_factory=list)


@dataclass
class DescribeSeverityLevelsRequest(WireModel):
    language: Optional[str] = wire('language')


@dataclass
class DescribeSeverityLevelsResponse(WireModel):
    severity_levels: List[SeverityLevel] = wire('severityLevels', default_factory=list)


@dataclass
class DescribeTrustedAdvisorCheckRefreshStatusesRequest(WireModel):
    check_ids: List[str] = wire('checkIds', required=True, default_factory=list)


@dataclass
class DescribeTrustedAdvisorCheckRefreshStatusesResponse(WireModel):
    statuses: List[TrustedAdvisorCheckRefreshStatus] = wire('statuses', required=True, default_factory=list)


@dataclass
class DescribeTrustedAdvisorCheckResultRequest(WireModel):
    check_id: str = wire('checkId', required=True, default='')
    language: Optional[str] = wire('language')


@dataclass
class DescribeTrustedAdvisorCheckResultResponse(WireModel):
    result: Optional[TrustedAdvisorCheckResult] = wire('result')


@dataclass
class DescribeTrustedAdvisorCheckSummariesRequest(WireModel):
    check_ids: List[str] = wire('checkIds', required=True, default_factory=list)


@dataclass
class DescribeTrustedAdvisorCheckSummariesResponse(WireModel):
    summaries: List[TrustedAdvisorCheckSummary] = wire('summaries', required=True, default_factory=list)


@dataclass
class DescribeTrustedAdvisorChecksRequest(WireModel):
    language: str = wire('language', required=True, default='en')


@dataclass
class DescribeTrustedAdvisorChecksResponse(WireModel):
    checks: List[TrustedAdvisorCheckDescription] = wire('checks', required=True, default_factory=list)


@dataclass
class RefreshTrustedAdvisorCheckRequest(WireModel):
    check_id: str = wire('checkId', required=True, default='')


@dataclass
class RefreshTrustedAdvisorCheckResponse(WireModel):
    status: TrustedAdvisorCheckRefreshStatus = wire(
        'status', required=True, default_factory=TrustedAdvisorCheckRefreshStatus)


@dataclass
class ResolveCaseRequest(WireModel):
    case_id: Optional[str] = wire('caseId')


@dataclass
class ResolveCaseResponse(WireModel):
    final_case_status: Optional[CaseStatus] = wire('finalCaseStatus')
    initial_case_status: Optional[CaseStatus] = wire('initialCaseStatus')
