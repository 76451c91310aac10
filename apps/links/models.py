from django.db import models
import uuid


DEFAULT_LINK_TITLE = 'Entry Form'


class Link(models.Model):
    """Shareable submission-collection campaign; entries are collected against it."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200, default=DEFAULT_LINK_TITLE)

    # Creator, keyed on the admin's stable identifier
    created_by = models.ForeignKey(
        'accounts.Admin',
        to_field='admin_id',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='links'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'links'
        indexes = [
            models.Index(fields=['created_at', 'id'], name='links_created_id_idx'),
        ]
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.title} ({self.id})"

    @property
    def submission_path(self):
        return f"/api/entries/links/{self.id}/submit/"
