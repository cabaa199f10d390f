import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Country",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(help_text="ISO 3166-1 alpha-3, e.g. USA", max_length=3, unique=True, verbose_name="Code")),
                ("name", models.CharField(max_length=255, verbose_name="Name")),
                ("states", models.JSONField(blank=True, help_text='State code to name, e.g. {"NY": "New York"}', null=True, verbose_name="States")),
            ],
            options={
                "verbose_name": "Country",
                "verbose_name_plural": "Countries",
                "ordering": ["name", "id"],
            },
        ),
        migrations.CreateModel(
            name="Customer",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated at")),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, primary_key=True, related_name="customer", serialize=False, to=settings.AUTH_USER_MODEL, verbose_name="User")),
                ("first_name", models.CharField(max_length=50, verbose_name="First name")),
                ("last_name", models.CharField(max_length=50, verbose_name="Last name")),
                ("phone", models.CharField(blank=True, max_length=32, verbose_name="Phone")),
                ("status", models.CharField(choices=[("active", "Active"), ("disabled", "Disabled")], default="active", max_length=10, verbose_name="Status")),
            ],
            options={
                "verbose_name": "Customer",
                "verbose_name_plural": "Customers",
            },
        ),
        migrations.CreateModel(
            name="CustomerAddress",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated at")),
                ("type", models.CharField(choices=[("shipping", "Shipping"), ("billing", "Billing")], max_length=10, verbose_name="Type")),
                ("address1", models.CharField(max_length=255, verbose_name="Address 1")),
                ("address2", models.CharField(blank=True, default="", max_length=255, verbose_name="Address 2")),
                ("city", models.CharField(max_length=255, verbose_name="City")),
                ("state", models.CharField(blank=True, default="", max_length=45, verbose_name="State")),
                ("zipcode", models.CharField(max_length=45, verbose_name="Zip code")),
                ("country", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="addresses", to="customers.country", verbose_name="Country")),
                ("customer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="addresses", to="customers.customer", verbose_name="Customer")),
            ],
            options={
                "verbose_name": "Customer address",
                "verbose_name_plural": "Customer addresses",
                "constraints": [models.UniqueConstraint(fields=("customer", "type"), name="unique_customer_address_type")],
            },
        ),
    ]
