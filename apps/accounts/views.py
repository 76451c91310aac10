from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import (
    EmployeeSerializer,
    EmployeeRegistrationSerializer,
    LoginSerializer,
)
from .services import (
    register_employee,
    authenticate_employee,
    authenticate_admin,
    list_employees,
    EmployeeRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)


# Response serializers for API documentation
class RegistrationResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    employee_id = serializers.UUIDField()


class EmployeeLoginResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user_id = serializers.UUIDField()
    employee_id = serializers.UUIDField()
    name = serializers.CharField()


class AdminLoginResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    admin_id = serializers.UUIDField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=EmployeeRegistrationSerializer,
    responses={
        201: RegistrationResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new employee and receive the stable employee_id.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new employee account."""
    serializer = EmployeeRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        employee = register_employee(**serializer.validated_data)
    except EmployeeRegistrationError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response({
        'message': 'Registration successful',
        'employee_id': employee.employee_id,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=LoginSerializer,
    responses={
        200: EmployeeLoginResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate an employee with email and password.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Employee login with email and password."""
    serializer = LoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        employee = authenticate_employee(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Login successful',
        'user_id': employee.id,
        'employee_id': employee.employee_id,
        'name': employee.name,
    })


@extend_schema(
    request=LoginSerializer,
    responses={
        200: AdminLoginResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Authenticate an admin with email and password.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def admin_login(request):
    """Admin login with email and password."""
    serializer = LoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        admin = authenticate_admin(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

    return Response({
        'message': 'Admin login successful',
        'admin_id': admin.admin_id,
    })


@extend_schema(
    responses={200: EmployeeSerializer(many=True)},
    description="List all employees.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def employee_list(request):
    """List employees with their stable identifiers."""
    return Response(EmployeeSerializer(list_employees(), many=True).data)
