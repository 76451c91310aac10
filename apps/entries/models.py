from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class Entry(models.Model):
    """
    One payment submission tied to a link and an employee.

    Entries are immutable once created. A UPI id may be used at most once per
    link; the database constraint is the authority for that rule, so two
    concurrent submissions of the same id cannot both be stored.

    Link and employee are plain references: no database foreign key and no
    cascade, so an entry may outlive the records it points at.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    link = models.ForeignKey(
        'links.Link',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='entries'
    )

    # Keyed on the stable employee identifier, not the row id
    employee = models.ForeignKey(
        'accounts.Employee',
        to_field='employee_id',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='entries'
    )

    name = models.CharField(max_length=150)
    upi_id = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'entries'
        constraints = [
            models.UniqueConstraint(
                fields=['link', 'upi_id'],
                name='unique_upi_id_per_link'
            ),
        ]
        indexes = [
            models.Index(fields=['employee', 'link', 'created_at'], name='entries_emp_link_created_idx'),
            models.Index(fields=['link', 'employee'], name='entries_link_emp_idx'),
        ]
        ordering = ['created_at', 'id']
        verbose_name_plural = 'entries'

    def __str__(self):
        return f"{self.name} - {self.upi_id} - {self.amount}"
