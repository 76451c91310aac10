from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.accounts.services import AdminNotFoundError
from apps.entries.services import list_links_with_latest
from .serializers import (
    LinkSerializer,
    LinkWithLatestSerializer,
    LinkCreateSerializer,
    LinkCreateResponseSerializer,
)
from .services import create_link, get_link_by_id, LinkNotFoundError, InvalidLinkError


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


@extend_schema(
    methods=['GET'],
    responses={200: LinkWithLatestSerializer(many=True)},
    description="List all links newest first, flagging the most recently created one.",
    tags=['links'],
)
@extend_schema(
    methods=['POST'],
    request=LinkCreateSerializer,
    responses={
        201: LinkCreateResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Create a new link on behalf of an admin.",
    tags=['links'],
)
@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def link_list(request):
    """List links (GET) or create a link (POST)."""
    if request.method == 'GET':
        links = list_links_with_latest()
        return Response(LinkWithLatestSerializer(links, many=True).data)

    serializer = LinkCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        link = create_link(**serializer.validated_data)
    except (InvalidLinkError, AdminNotFoundError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'link': LinkSerializer(link).data,
        'submission_path': link.submission_path,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={
        200: LinkSerializer,
        404: ErrorResponseSerializer,
    },
    description="Get a single link.",
    tags=['links'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def link_detail(request, link_id):
    """Get link by ID."""
    try:
        link = get_link_by_id(link_id=link_id)
    except LinkNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(LinkSerializer(link).data)
