"""
Wire contract tests for Support request and response shapes.
"""
import json
import pytest
from models import (
    Attachment, CaseStatus, CheckStatus, IssueType, RefreshStatus, SeverityCode,
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
from services.support_service import OPERATIONS


class TestRequestSerialization:
    """Populated requests produce the exact wire field names."""

    def test_add_attachments_to_set(self):
        request = AddAttachmentsToSetRequest(
            attachment_set_id='as-123',
            attachments=[Attachment(data=b'hello', file_name='log.txt')]
        )
        assert request.to_dict() == {
            'attachmentSetId': 'as-123',
            'attachments': [{'data': 'aGVsbG8=', 'fileName': 'log.txt'}],
        }

    def test_add_attachments_to_set_new_set(self):
        """Attachments are always sent; a missing set id asks for a new set."""
        assert AddAttachmentsToSetRequest().to_dict() == {'attachments': []}

    def test_add_communication_to_case(self):
        request = AddCommunicationToCaseRequest(
            case_id='case-12345678910-2013-c4c1d2bf33c5cf47',
            communication_body='Any update?',
            cc_email_addresses=['ops@example.com'],
            attachment_set_id='as-123'
        )
        assert request.to_dict() == {
            'caseId': 'case-12345678910-2013-c4c1d2bf33c5cf47',
            'communicationBody': 'Any update?',
            'ccEmailAddresses': ['ops@example.com'],
            'attachmentSetId': 'as-123',
        }

    def test_create_case(self):
        request = CreateCaseRequest(
            subject='Instance unreachable',
            communication_body='i-0abc stopped responding',
            service_code='amazon-elastic-compute-cloud-linux',
            category_code='instance-issue',
            severity_code=SeverityCode.HIGH,
            issue_type=IssueType.TECHNICAL,
            cc_email_addresses=['ops@example.com'],
            language='en'
        )
        assert request.to_dict() == {
            'subject': 'Instance unreachable',
            'communicationBody': 'i-0abc stopped responding',
            'serviceCode': 'amazon-elastic-compute-cloud-linux',
            'categoryCode': 'instance-issue',
            'severityCode': 'high',
            'issueType': 'technical',
            'ccEmailAddresses': ['ops@example.com'],
            'language': 'en',
        }

    def test_create_case_minimal(self):
        """Only the required subject and body are sent when nothing else is set."""
        request = CreateCaseRequest(subject='Billing question', communication_body='Why?')
        assert request.to_dict() == {'subject': 'Billing question', 'communicationBody': 'Why?'}

    def test_create_case_required_fields_sent_when_empty(self):
        assert CreateCaseRequest().to_dict() == {'subject': '', 'communicationBody': ''}

    def test_describe_attachment(self):
        request = DescribeAttachmentRequest(attachment_id='attachment-KBnjRNrePd9D6Jx0-Mm00xZuDEaL2JAj')
        assert request.to_dict() == {'attachmentId': 'attachment-KBnjRNrePd9D6Jx0-Mm00xZuDEaL2JAj'}

    def test_describe_cases(self):
        request = DescribeCasesRequest(
            case_id_list=['case-1', 'case-2'],
            after_time='2024-01-01T00:00:00Z',
            include_resolved_cases=True,
            max_results=25,
            next_token='token-1'
        )
        assert request.to_dict() == {
            'caseIdList': ['case-1', 'case-2'],
            'afterTime': '2024-01-01T00:00:00Z',
            'includeResolvedCases': True,
            'maxResults': 25,
            'nextToken': 'token-1',
        }

    def test_describe_cases_empty_fields_absent(self):
        """False flags, zero counts and empty lists are left off the wire."""
        request = DescribeCasesRequest(
            case_id_list=[],
            include_communications=False,
            max_results=0,
            display_id=''
        )
        assert request.to_dict() == {}

    def test_describe_communications(self):
        request = DescribeCommunicationsRequest(case_id='case-1', max_results=10)
        assert request.to_dict() == {'caseId': 'case-1', 'maxResults': 10}

    def test_describe_services(self):
        request = DescribeServicesRequest(service_code_list=['amazon-s3'], language='ja')
        assert request.to_dict() == {'serviceCodeList': ['amazon-s3'], 'language': 'ja'}

    def test_describe_severity_levels(self):
        assert DescribeSeverityLevelsRequest().to_dict() == {}
        assert DescribeSeverityLevelsRequest(language='en').to_dict() == {'language': 'en'}

    def test_trusted_advisor_check_ids_always_sent(self):
        assert DescribeTrustedAdvisorCheckRefreshStatusesRequest().to_dict() == {'checkIds': []}
        assert DescribeTrustedAdvisorCheckSummariesRequest(
            check_ids=['Pfx0RwqBli', 'Qch7DwouX1']
        ).to_dict() == {'checkIds': ['Pfx0RwqBli', 'Qch7DwouX1']}

    def test_describe_trusted_advisor_check_result(self):
        request = DescribeTrustedAdvisorCheckResultRequest(check_id='Pfx0RwqBli')
        assert request.to_dict() == {'checkId': 'Pfx0RwqBli'}

    def test_describe_trusted_advisor_checks_defaults_to_english(self):
        assert DescribeTrustedAdvisorChecksRequest().to_dict() == {'language': 'en'}

    def test_refresh_trusted_advisor_check(self):
        assert RefreshTrustedAdvisorCheckRequest(check_id='Pfx0RwqBli').to_dict() == {'checkId': 'Pfx0RwqBli'}

    def test_resolve_case(self):
        assert ResolveCaseRequest(case_id='case-1').to_dict() == {'caseId': 'case-1'}
        assert ResolveCaseRequest().to_dict() == {}


class TestResponseDeserialization:
    """Example service responses decode into typed structures."""

    def test_add_attachments_to_set(self):
        response = AddAttachmentsToSetResponse.from_dict({
            'attachmentSetId': 'as-2f5a6faa2a4a1e600-mu-nk5xQlBr70-G1cUos5LZkd38KOAHZa9BMDVzNEXAMPLE',
            'expiryTime': '2024-08-30T15:39:49.485Z',
        })
        assert response.attachment_set_id.startswith('as-2f5a6faa')
        assert response.expiry_time == '2024-08-30T15:39:49.485Z'

    def test_add_communication_to_case(self):
        assert AddCommunicationToCaseResponse.from_dict({'result': True}).result is True
        assert AddCommunicationToCaseResponse.from_dict({}).result is False

    def test_create_case_ignores_unknown_keys(self):
        response = CreateCaseResponse.from_dict({'caseId': 'case-1', 'somethingNew': 42})
        assert response.case_id == 'case-1'

    def test_describe_attachment_decodes_base64(self):
        response = DescribeAttachmentResponse.from_dict({
            'attachment': {'data': 'aGVsbG8=', 'fileName': 'log.txt'}
        })
        assert response.attachment.data == b'hello'
        assert response.attachment.file_name == 'log.txt'

    def test_describe_cases(self):
        response = DescribeCasesResponse.from_dict({
            'cases': [{
                'caseId': 'case-12345678910-2013-c4c1d2bf33c5cf47',
                'displayId': '1234567890',
                'subject': 'Instance unreachable',
                'status': 'opened',
                'serviceCode': 'amazon-elastic-compute-cloud-linux',
                'categoryCode': 'instance-issue',
                'severityCode': 'urgent',
                'submittedBy': 'ops@example.com',
                'timeCreated': '2024-01-02T10:00:00.000Z',
                'language': 'en',
                'ccEmailAddresses': ['lead@example.com'],
                'recentCommunications': {
                    'communications': [{
                        'caseId': 'case-12345678910-2013-c4c1d2bf33c5cf47',
                        'body': 'i-0abc stopped responding',
                        'submittedBy': 'ops@example.com',
                        'timeCreated': '2024-01-02T10:00:00.000Z',
                        'attachmentSet': [{'attachmentId': 'attachment-1', 'fileName': 'log.txt'}],
                    }],
                    'nextToken': 'comm-token',
                },
            }],
            'nextToken': 'case-token',
        })

        assert response.next_token == 'case-token'
        assert len(response.cases) == 1
        case = response.cases[0]
        assert case.status is CaseStatus.OPENED
        assert case.severity_code is SeverityCode.URGENT
        assert case.cc_email_addresses == ['lead@example.com']
        communication = case.recent_communications.communications[0]
        assert communication.body == 'i-0abc stopped responding'
        assert communication.attachment_set[0].attachment_id == 'attachment-1'
        assert case.recent_communications.next_token == 'comm-token'

    def test_describe_communications(self):
        response = DescribeCommunicationsResponse.from_dict({
            'communications': [
                {'caseId': 'case-1', 'body': 'first'},
                {'caseId': 'case-1', 'body': 'second'},
            ]
        })
        assert [c.body for c in response.communications] == ['first', 'second']
        assert response.next_token is None

    def test_describe_services(self):
        response = DescribeServicesResponse.from_dict({
            'services': [{
                'code': 'amazon-s3',
                'name': 'Simple Storage Service (S3)',
                'categories': [{'code': 'general-guidance', 'name': 'General Guidance'}],
            }]
        })
        service = response.services[0]
        assert service.code == 'amazon-s3'
        assert service.categories[0].name == 'General Guidance'

    def test_describe_severity_levels(self):
        response = DescribeSeverityLevelsResponse.from_dict({
            'severityLevels': [
                {'code': 'low', 'name': 'Low'},
                {'code': 'critical', 'name': 'Critical'},
            ]
        })
        assert [level.code for level in response.severity_levels] == [SeverityCode.LOW, SeverityCode.CRITICAL]

    def test_describe_trusted_advisor_check_refresh_statuses(self):
        response = DescribeTrustedAdvisorCheckRefreshStatusesResponse.from_dict({
            'statuses': [
                {'checkId': 'Pfx0RwqBli', 'status': 'processing', 'millisUntilNextRefreshable': 0},
                {'checkId': 'Qch7DwouX1', 'status': 'success', 'millisUntilNextRefreshable': 3436949},
            ]
        })
        assert response.statuses[0].status is RefreshStatus.PROCESSING
        assert response.statuses[1].millis_until_next_refreshable == 3436949

    def test_describe_trusted_advisor_check_result(self):
        response = DescribeTrustedAdvisorCheckResultResponse.from_dict({
            'result': {
                'checkId': 'Qch7DwouX1',
                'status': 'warning',
                'timestamp': '2024-05-01T12:00:00Z',
                'categorySpecificSummary': {
                    'costOptimizing': {
                        'estimatedMonthlySavings': 123.45,
                        'estimatedPercentMonthlySavings': 12,
                    }
                },
                'resourcesSummary': {
                    'resourcesFlagged': 2,
                    'resourcesIgnored': 0,
                    'resourcesProcessed': 40,
                    'resourcesSuppressed': 1,
                },
                'flaggedResources': [{
                    'resourceId': '47DEQpj8HBSa-_TImW-5JCeuQeRkm5NMpJWZEXAMPLE',
                    'region': 'us-east-1',
                    'status': 'warning',
                    'isSuppressed': False,
                    'metadata': ['us-east-1a', 'i-0abc', 't3.large'],
                }],
            }
        })
        result = response.result
        assert result.status is CheckStatus.WARNING
        savings = result.category_specific_summary.cost_optimizing
        assert savings.estimated_monthly_savings == 123.45
        assert savings.estimated_percent_monthly_savings == 12.0
        assert isinstance(savings.estimated_percent_monthly_savings, float)
        assert result.resources_summary.resources_processed == 40
        assert result.flagged_resources[0].status is CheckStatus.WARNING
        assert result.flagged_resources[0].metadata == ['us-east-1a', 'i-0abc', 't3.large']

    def test_describe_trusted_advisor_check_summaries(self):
        response = DescribeTrustedAdvisorCheckSummariesResponse.from_dict({
            'summaries': [{
                'checkId': 'Pfx0RwqBli',
                'status': 'not_available',
                'timestamp': '2024-05-01T12:00:00Z',
                'hasFlaggedResources': True,
                'resourcesSummary': {
                    'resourcesFlagged': 0,
                    'resourcesIgnored': 0,
                    'resourcesProcessed': 0,
                    'resourcesSuppressed': 0,
                },
                'categorySpecificSummary': {},
            }]
        })
        summary = response.summaries[0]
        assert summary.status is CheckStatus.NOT_AVAILABLE
        assert summary.has_flagged_resources is True
        assert summary.category_specific_summary.cost_optimizing is None

    def test_describe_trusted_advisor_checks(self):
        response = DescribeTrustedAdvisorChecksResponse.from_dict({
            'checks': [{
                'id': 'Pfx0RwqBli',
                'name': 'Amazon S3 Bucket Permissions',
                'description': 'Checks buckets for open access permissions.',
                'category': 'security',
                'metadata': ['Region Name', 'Bucket Name'],
            }]
        })
        check = response.checks[0]
        assert check.id == 'Pfx0RwqBli'
        assert check.category == 'security'
        assert check.metadata == ['Region Name', 'Bucket Name']

    def test_refresh_trusted_advisor_check(self):
        response = RefreshTrustedAdvisorCheckResponse.from_dict({
            'status': {'checkId': 'Pfx0RwqBli', 'status': 'enqueued', 'millisUntilNextRefreshable': 3600000}
        })
        assert response.status.status is RefreshStatus.ENQUEUED
        assert response.status.millis_until_next_refreshable == 3600000

    def test_resolve_case(self):
        response = ResolveCaseResponse.from_dict({
            'initialCaseStatus': 'work-in-progress',
            'finalCaseStatus': 'resolved',
        })
        assert response.initial_case_status is CaseStatus.WORK_IN_PROGRESS
        assert response.final_case_status is CaseStatus.RESOLVED

    def test_null_values_keep_defaults(self):
        response = DescribeCasesResponse.from_dict({'cases': None, 'nextToken': None})
        assert response.cases == []
        assert response.next_token is None


class TestClosedVocabularies:
    """Enum-like fields reject values outside their vocabulary."""

    def test_unknown_check_status_rejected(self):
        with pytest.raises(ValueError):
            DescribeTrustedAdvisorCheckSummariesResponse.from_dict({
                'summaries': [{'checkId': 'x', 'status': 'purple'}]
            })

    def test_unknown_refresh_status_rejected(self):
        with pytest.raises(ValueError):
            RefreshTrustedAdvisorCheckResponse.from_dict({
                'status': {'checkId': 'x', 'status': 'later', 'millisUntilNextRefreshable': 0}
            })

    def test_unknown_case_status_rejected(self):
        with pytest.raises(ValueError):
            ResolveCaseResponse.from_dict({'finalCaseStatus': 'closed'})

    def test_wrong_container_type_rejected(self):
        with pytest.raises(ValueError):
            DescribeCasesResponse.from_dict({'cases': 'not-a-list'})

    def test_enum_accepts_plain_string_values(self):
        assert IssueType('customer-service') is IssueType.CUSTOMER_SERVICE
        assert CreateCaseRequest(
            subject='s', communication_body='b', issue_type=IssueType.CUSTOMER_SERVICE
        ).to_dict()['issueType'] == 'customer-service'


class TestScalarTypes:
    """Scalar fields reject values of the wrong JSON type."""

    def test_string_field_rejects_object(self):
        with pytest.raises(ValueError, match='string'):
            CreateCaseRequest.from_dict({'subject': {'x': 1}, 'communicationBody': 'b'})

    def test_string_field_rejects_number(self):
        with pytest.raises(ValueError, match='string'):
            CreateCaseRequest.from_dict({'subject': 's', 'communicationBody': 7})

    def test_string_list_rejects_number_items(self):
        with pytest.raises(ValueError, match='string'):
            DescribeCasesRequest.from_dict({'caseIdList': ['case-1', 2]})

    def test_int_field_rejects_string(self):
        with pytest.raises(ValueError, match='integer'):
            DescribeCasesRequest.from_dict({'maxResults': '25'})

    def test_int_field_rejects_fraction(self):
        with pytest.raises(ValueError, match='integer'):
            RefreshTrustedAdvisorCheckResponse.from_dict({
                'status': {'checkId': 'x', 'status': 'none', 'millisUntilNextRefreshable': 2.9}
            })

    def test_int_field_rejects_list(self):
        with pytest.raises(ValueError, match='integer'):
            DescribeCasesRequest.from_dict({'maxResults': [1]})

    def test_int_field_rejects_bool(self):
        with pytest.raises(ValueError, match='integer'):
            DescribeCommunicationsRequest.from_dict({'caseId': 'case-1', 'maxResults': True})

    def test_float_field_accepts_int_rejects_string(self):
        summary = DescribeTrustedAdvisorCheckResultResponse.from_dict({
            'result': {'categorySpecificSummary': {'costOptimizing': {
                'estimatedMonthlySavings': 5,
                'estimatedPercentMonthlySavings': 1.5,
            }}}
        }).result.category_specific_summary.cost_optimizing
        assert summary.estimated_monthly_savings == 5.0

        with pytest.raises(ValueError, match='number'):
            DescribeTrustedAdvisorCheckResultResponse.from_dict({
                'result': {'categorySpecificSummary': {'costOptimizing': {
                    'estimatedMonthlySavings': '5',
                }}}
            })

    def test_bool_field_rejects_string(self):
        with pytest.raises(ValueError, match='boolean'):
            DescribeCasesRequest.from_dict({'includeResolvedCases': 'true'})

    def test_bool_field_rejects_int(self):
        with pytest.raises(ValueError, match='boolean'):
            AddCommunicationToCaseResponse.from_dict({'result': 1})

    def test_enum_field_rejects_non_string(self):
        with pytest.raises(ValueError, match='SeverityCode'):
            CreateCaseRequest.from_dict({'severityCode': ['low']})

    def test_bytes_field_rejects_non_string(self):
        with pytest.raises(ValueError, match='base64'):
            DescribeAttachmentResponse.from_dict({'attachment': {'data': [104, 105]}})

    def test_bytes_field_rejects_invalid_base64(self):
        with pytest.raises(ValueError, match='base64'):
            DescribeAttachmentResponse.from_dict({'attachment': {'data': 'not base64!'}})


class TestRequiredResponseFields:

    def test_refresh_status_defaults_serialized(self):
        assert RefreshTrustedAdvisorCheckResponse().to_dict() == {
            'status': {'checkId': '', 'millisUntilNextRefreshable': 0, 'status': 'none'}
        }

    def test_resources_summary_zero_counts_serialized(self):
        summary = DescribeTrustedAdvisorCheckResultResponse.from_dict({
            'result': {'checkId': 'Pfx0RwqBli', 'status': 'ok', 'timestamp': 't'}
        }).result
        assert summary.to_dict()['resourcesSummary'] == {
            'resourcesFlagged': 0,
            'resourcesIgnored': 0,
            'resourcesProcessed': 0,
            'resourcesSuppressed': 0,
        }
        assert summary.to_dict()['flaggedResources'] == []


@pytest.mark.parametrize('name', sorted(OPERATIONS))
def test_operation_shapes_are_json_ready(name):
    """Every operation's default request serializes and an empty body decodes."""
    op = OPERATIONS[name]
    json.dumps(op.request_type().to_dict())
    assert isinstance(op.response_type.from_dict({}), op.response_type)
