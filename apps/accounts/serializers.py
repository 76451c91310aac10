from rest_framework import serializers
from .models import Employee


class EmployeeSerializer(serializers.ModelSerializer):
    """Employee directory listing."""

    class Meta:
        model = Employee
        fields = [
            'id',
            'employee_id',
            'name',
            'email',
        ]
        read_only_fields = fields


class EmployeeRegistrationSerializer(serializers.Serializer):
    """Serializer for employee registration."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    name = serializers.CharField(required=True, max_length=150)


class LoginSerializer(serializers.Serializer):
    """Serializer for employee and admin login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
