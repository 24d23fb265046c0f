from django.db import migrations, models
import invoices.models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('id', models.CharField(default=invoices.models.generate_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('email', models.EmailField(db_index=True, max_length=254)),
            ],
            options={
                'db_table': 'users',
            },
            managers=[
                ('objects', invoices.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name='Invoice',
            fields=[
                ('id', models.CharField(default=invoices.models.generate_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('customer_id', models.CharField(db_index=True, max_length=255)),
                ('amount', models.IntegerField(help_text='Amount in cents')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('paid', 'Paid')], default='pending', max_length=20)),
                ('date', models.DateField()),
            ],
            options={
                'db_table': 'invoices',
                'ordering': ['-date'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('amount__gt', 0)), name='invoices_amount_positive'),
                ],
            },
        ),
    ]
