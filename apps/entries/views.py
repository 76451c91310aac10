from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, parser_classes, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.accounts.services import EmployeeNotFoundError
from apps.links.services import LinkNotFoundError
from .serializers import (
    SubmissionSerializer,
    PaginationQuerySerializer,
    MyEntriesQuerySerializer,
    LinkEntriesQuerySerializer,
    EntrySerializer,
    SubmissionResponseSerializer,
    EmployeeLinkEntriesSerializer,
    MyLinkEntriesSerializer,
    EmployeeLinksSerializer,
    LinkSummarySerializer,
)
from .services import (
    submit_entry,
    get_entries_by_link,
    get_entries_by_employee,
    get_links_by_employee,
    get_employee_link_entries,
    get_my_link_entries,
    get_link_summary,
    SubmissionValidationError,
    UnreadableQRCodeError,
    DuplicateSubmissionError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


@extend_schema(
    request=SubmissionSerializer,
    responses={
        201: SubmissionResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description=(
        "Submit a payment entry against a link. Send the UPI QR code as a "
        "multipart `qr_image` upload, or the UPI id directly as `upi_id`."
    ),
    tags=['entries'],
)
@api_view(['POST'])
@parser_classes([MultiPartParser, FormParser, JSONParser])
@permission_classes([AllowAny])
def submit(request, link_id):
    """Submit an entry; each UPI id may be used once per link."""
    serializer = SubmissionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    qr_file = data.get('qr_image')

    try:
        entry = submit_entry(
            link_id=link_id,
            employee_id=data['employee_id'],
            name=data['name'],
            amount=data['amount'],
            qr_image=qr_file.read() if qr_file else None,
            upi_id=data.get('upi_id'),
        )
    except (SubmissionValidationError, UnreadableQRCodeError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except (LinkNotFoundError, EmployeeNotFoundError) as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except DuplicateSubmissionError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response({
        'message': 'Entry submitted successfully',
        'upi_id': entry.upi_id,
        'entry': EntrySerializer(entry).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[LinkEntriesQuerySerializer],
    responses={200: EntrySerializer(many=True)},
    description="List entries submitted against a link, optionally for one employee.",
    tags=['entries'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def link_entries(request, link_id):
    """Entries for a link."""
    query = LinkEntriesQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    entries = get_entries_by_link(
        link_id=link_id,
        employee_id=query.validated_data.get('employee_id'),
    )
    return Response(EntrySerializer(entries, many=True).data)


@extend_schema(
    responses={
        200: LinkSummarySerializer,
        404: ErrorResponseSerializer,
    },
    description="Per-employee entry counts and totals for a link, with the grand total.",
    tags=['entries'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def link_summary(request, link_id):
    """Summary of a link grouped by employee."""
    try:
        summary = get_link_summary(link_id=link_id)
    except LinkNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(LinkSummarySerializer(summary).data)


@extend_schema(
    parameters=[MyEntriesQuerySerializer],
    responses={200: MyLinkEntriesSerializer},
    description=(
        "An employee's own entries for a link, newest first, with the total "
        "amount and whether the link is the newest one."
    ),
    tags=['entries'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def my_link_entries(request, link_id):
    """Employee-facing paginated entries for one link."""
    query = MyEntriesQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data

    result = get_my_link_entries(
        employee_id=params['employee_id'],
        link_id=link_id,
        page=params['page'],
        limit=params.get('limit'),
    )
    return Response(MyLinkEntriesSerializer(result).data)


@extend_schema(
    responses={200: EntrySerializer(many=True)},
    description="List every entry submitted by an employee.",
    tags=['entries'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def employee_entries(request, employee_id):
    """Entries for an employee."""
    entries = get_entries_by_employee(employee_id=employee_id)
    return Response(EntrySerializer(entries, many=True).data)


@extend_schema(
    parameters=[PaginationQuerySerializer],
    responses={200: EmployeeLinksSerializer},
    description="Distinct links an employee has submitted to, paginated.",
    tags=['entries'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def employee_links(request, employee_id):
    """Links touched by an employee."""
    query = PaginationQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data

    result = get_links_by_employee(
        employee_id=employee_id,
        page=params['page'],
        limit=params.get('limit'),
    )
    return Response(EmployeeLinksSerializer(result).data)


@extend_schema(
    parameters=[PaginationQuerySerializer],
    responses={200: EmployeeLinkEntriesSerializer},
    description="An employee's entries for a link, newest first, with the total amount.",
    tags=['entries'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def employee_link_entries(request, employee_id, link_id):
    """Admin-facing paginated entries for one (employee, link) pair."""
    query = PaginationQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data

    result = get_employee_link_entries(
        employee_id=employee_id,
        link_id=link_id,
        page=params['page'],
        limit=params.get('limit'),
    )
    return Response(EmployeeLinkEntriesSerializer(result).data)
