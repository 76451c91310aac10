from decimal import Decimal

from rest_framework import serializers
from apps.links.serializers import LinkSerializer
from .models import Entry


# =============================================================================
# Input Serializers
# =============================================================================

class SubmissionSerializer(serializers.Serializer):
    """
    Validate a submission against a link.

    Exactly one of ``qr_image`` (multipart upload) or ``upi_id`` is expected;
    the service layer enforces that rule.
    """

    employee_id = serializers.UUIDField()
    name = serializers.CharField(max_length=150)
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    qr_image = serializers.FileField(required=False)
    upi_id = serializers.CharField(max_length=255, required=False)


class PaginationQuerySerializer(serializers.Serializer):
    """
    Validate page/limit query parameters.

    Query Parameters:
        page (int): 1-based page number, default 1
        limit (int): Page size; the default depends on the endpoint
    """

    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, required=False)


class MyEntriesQuerySerializer(PaginationQuerySerializer):
    employee_id = serializers.UUIDField()


class LinkEntriesQuerySerializer(serializers.Serializer):
    employee_id = serializers.UUIDField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class EntrySerializer(serializers.ModelSerializer):
    """Entry details; link and employee are reported by identifier."""

    link_id = serializers.UUIDField(read_only=True)
    employee_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Entry
        fields = [
            'id',
            'link_id',
            'employee_id',
            'name',
            'upi_id',
            'amount',
            'created_at',
        ]
        read_only_fields = fields


class SubmissionResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    upi_id = serializers.CharField()
    entry = EntrySerializer()


class EmployeeLinkEntriesSerializer(serializers.Serializer):
    """Page of one employee's entries for one link."""

    entries = EntrySerializer(many=True)
    total = serializers.IntegerField()
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    page = serializers.IntegerField()
    pages = serializers.IntegerField()


class MyLinkEntriesSerializer(EmployeeLinkEntriesSerializer):
    is_latest = serializers.BooleanField()


class EmployeeLinksSerializer(serializers.Serializer):
    """Page of the distinct links an employee has submitted to."""

    links = LinkSerializer(many=True)
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    pages = serializers.IntegerField()


class LinkSummaryRowSerializer(serializers.Serializer):
    employee_id = serializers.UUIDField()
    name = serializers.CharField()
    entry_count = serializers.IntegerField()
    employee_total = serializers.DecimalField(max_digits=14, decimal_places=2)


class LinkSummarySerializer(serializers.Serializer):
    title = serializers.CharField()
    rows = LinkSummaryRowSerializer(many=True)
    grand_total = serializers.DecimalField(max_digits=14, decimal_places=2)
