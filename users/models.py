from django.db import models
from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin, BaseUserManager
from django.core.exceptions import ValidationError
from django.utils import timezone

# public user identifier - what sessions and API payloads expose instead of the pk
import time
import random
import string

def generate_user_id():
    prefix = random.choice(string.ascii_lowercase)
    epoch = int(time.time())
    suffix = random.randint(1, 9999)
    return f"{prefix}{epoch}{suffix}"

class CustomUserManager(BaseUserManager):

    def normalize_email(self, email):
        # the whole address is case-insensitive here, not just the domain
        return (email or "").strip().lower()

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Email is required")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    email = models.EmailField(unique=True)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    date_joined = models.DateTimeField(default=timezone.now)

    user_id = models.CharField(max_length=32, unique=True, default=generate_user_id, editable=False)

    objects = CustomUserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    def __str__(self):
        return self.email


class Profile(models.Model):
    # keyed by the user - saving twice updates the same row
    user = models.OneToOneField(User, on_delete=models.CASCADE, primary_key=True, related_name='profile')

    name = models.CharField(max_length=150, blank=True)
    birthday = models.DateField(blank=True, null=True)
    height = models.FloatField(blank=True, null=True)  # cm
    weight = models.FloatField(blank=True, null=True)  # kg
    country = models.CharField(max_length=100, blank=True)
    avatar_url = models.CharField(max_length=255, blank=True)  # path inside the avatars bucket

    updated_at = models.DateTimeField(auto_now=True)

    def clean(self):
        if self.height is not None and self.height <= 0:
            raise ValidationError({"height": "Height must be a positive number."})
        if self.weight is not None and self.weight <= 0:
            raise ValidationError({"weight": "Weight must be a positive number."})

    def __str__(self):
        return f"Profile for {self.user.email}"
