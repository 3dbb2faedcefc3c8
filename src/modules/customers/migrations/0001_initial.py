import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("email", models.CharField(max_length=254)),
                ("user_id", models.CharField(max_length=255)),
                ("document_number", models.CharField(max_length=50)),
                ("customer_type", models.CharField(max_length=50)),
            ],
            options={
                "db_table": "customers",
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(
                        fields=["created_at"], name="customers_created_idx"
                    )
                ],
            },
        ),
    ]
