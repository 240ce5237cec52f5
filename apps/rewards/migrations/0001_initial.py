import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Reward',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(db_index=True, max_length=100)),
                ('short_description', models.CharField(max_length=200)),
                ('description', models.TextField(max_length=1000)),
                ('terms_and_conditions', models.JSONField(blank=True, default=list)),
                ('terms', models.TextField(blank=True, max_length=2000, null=True)),
                ('points_cost', models.PositiveIntegerField(db_index=True, validators=[django.core.validators.MinValueValidator(1)])),
                ('type', models.CharField(choices=[('voucher', 'Voucher'), ('discount', 'Discount'), ('coupon', 'Coupon'), ('gift', 'Gift'), ('experience', 'Experience'), ('other', 'Other')], db_index=True, default='other', max_length=20)),
                ('images', models.JSONField(blank=True, default=list)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('valid_until', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Reward',
                'verbose_name_plural': 'Rewards',
                'db_table': 'rewards',
                'ordering': ['points_cost', 'id'],
                'constraints': [models.CheckConstraint(condition=models.Q(('points_cost__gte', 1)), name='rewards_points_cost_positive')],
            },
        ),
        migrations.CreateModel(
            name='RewardRedemption',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('short_description', models.CharField(blank=True, max_length=200)),
                ('points_cost', models.PositiveIntegerField()),
                ('redeemed_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('used', models.BooleanField(default=False)),
                ('used_at', models.DateTimeField(blank=True, null=True)),
                ('reward', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='redemptions', to='rewards.reward')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='redeemed_rewards', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Reward Redemption',
                'verbose_name_plural': 'Reward Redemptions',
                'db_table': 'reward_redemptions',
                'ordering': ['redeemed_at', 'id'],
            },
        ),
    ]
