from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework.exceptions import AuthenticationFailed
from django.contrib.auth import authenticate, get_user_model

User = get_user_model()

class EmailTokenObtainPairSerializer(TokenObtainPairSerializer):
    username_field = 'email'

    def validate(self, attrs):
        email = User.objects.normalize_email(attrs.get("email"))
        password = attrs.get("password")

        if email and password:
            user = authenticate(request=self.context.get('request'), email=email, password=password)
            if not user:
                raise AuthenticationFailed("Invalid login credentials", code='authorization')
        else:
            raise AuthenticationFailed("Missing credentials", code='authorization')

        attrs["email"] = email
        data = super().validate(attrs)
        data["user_id"] = user.user_id
        data["email"] = user.email
        return data
