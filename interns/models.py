from django.conf import settings
from django.db import models
from django.utils import timezone


class InternQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status=Intern.ACTIVE)

    def ending_between(self, start, end):
        return self.active().filter(end_date__gte=start, end_date__lte=end)

    def for_user(self, user):
        """The intern record belonging to a logged-in intern account."""
        found = self.filter(models.Q(account=user) | models.Q(email__iexact=user.email)).first()
        if found is None:
            raise Intern.DoesNotExist(f"No intern profile for {user.email}")
        return found


class Intern(models.Model):
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    TERMINATED = "TERMINATED"
    STATUS = [
        (ACTIVE, "Active"),
        (COMPLETED, "Completed"),
        (TERMINATED, "Terminated"),
    ]

    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50, blank=True)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=20, blank=True)
    university = models.CharField(max_length=100, blank=True)
    major = models.CharField(max_length=100, blank=True)
    start_date = models.DateField()
    end_date = models.DateField()
    supervisor = models.CharField(max_length=100, blank=True)
    department = models.CharField(max_length=100)

    status = models.CharField(max_length=20, choices=STATUS, default=ACTIVE)

    # managing HR user
    hr_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="managed_interns",
    )
    # the intern's own login
    account = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name="intern_profile",
    )

    # set once the welcome email and notification both went out
    welcome_sent_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = InternQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gte=models.F("start_date")),
                name="intern_end_date_not_before_start",
            ),
        ]

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def days_left(self):
        return (self.end_date - timezone.localdate()).days

    def mark_welcome_sent(self):
        self.welcome_sent_at = timezone.now()
        self.save(update_fields=["welcome_sent_at", "updated_at"])

    def __str__(self):
        return f"{self.full_name} <{self.email}> ({self.status})"
