from django.db import models
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.utils.translation import gettext_lazy as _


class UserManager(BaseUserManager):
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError("Email must be set")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", User.HR)
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    HR = "HR"
    INTERN = "INTERN"
    ROLES = [
        (HR, "HR"),
        (INTERN, "Intern"),
    ]

    username = None  # remove username
    email = models.EmailField(_("email address"), unique=True)
    role = models.CharField(max_length=10, choices=ROLES, default=INTERN)
    password_changed_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = UserManager()

    @property
    def display_name(self):
        full = self.get_full_name().strip()  # uses first_name + last_name
        return full if full else self.email

    @property
    def is_hr(self):
        return self.role == self.HR

    @property
    def is_intern(self):
        return self.role == self.INTERN

    def __str__(self):
        return self.display_name
