from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'username',
            'bio',
            'travel_tags',
            'profile_picture_url',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'email', 'created_at', 'last_login']


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    email = serializers.EmailField(required=True)
    username = serializers.CharField(max_length=50, required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )

    def validate_username(self, value):
        return value.strip()

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class ProfileUpdateSerializer(serializers.Serializer):
    """Fields a user may change on their own profile."""

    username = serializers.CharField(max_length=50, required=False)
    bio = serializers.CharField(required=False, allow_blank=True)
    travel_tags = serializers.ListField(
        child=serializers.CharField(max_length=50),
        required=False
    )
    profile_picture_url = serializers.URLField(required=False, allow_blank=True)

    def validate_travel_tags(self, value):
        # Keep first occurrence order, drop duplicates
        return list(dict.fromkeys(tag.strip() for tag in value if tag.strip()))


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for feeds, trip members, etc.)."""

    class Meta:
        model = User
        fields = ['id', 'username', 'email']
        read_only_fields = fields
