import django.core.validators
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
            name='Entry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('participant_names', models.TextField(blank=True)),
                ('dance_style', models.CharField(blank=True, max_length=64)),
                ('status', models.CharField(choices=[('pending', 'Awaiting selection'), ('submitted', 'Submitted'), ('selected', 'Selected'), ('rejected', 'Not selected')], default='pending', max_length=12)),
                ('basic_info_status', models.CharField(choices=[('not_started', 'Not started'), ('unregistered', 'In progress'), ('registered', 'Registered')], default='not_started', max_length=16)),
                ('preliminary_info_status', models.CharField(choices=[('not_started', 'Not started'), ('unregistered', 'In progress'), ('registered', 'Registered')], default='not_started', max_length=16)),
                ('semifinals_info_status', models.CharField(choices=[('not_started', 'Not started'), ('unregistered', 'In progress'), ('registered', 'Registered')], default='not_started', max_length=16)),
                ('finals_info_status', models.CharField(choices=[('not_started', 'Not started'), ('unregistered', 'In progress'), ('registered', 'Registered')], default='not_started', max_length=16)),
                ('applications_info_status', models.CharField(choices=[('not_started', 'Not started'), ('unregistered', 'In progress'), ('registered', 'Registered')], default='not_started', max_length=16)),
                ('sns_info_status', models.CharField(choices=[('not_started', 'Not started'), ('unregistered', 'In progress'), ('registered', 'Registered')], default='not_started', max_length=16)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to=settings.AUTH_USER_MODEL)),
            ],
            options={'ordering': ('-created_at', 'pk'), 'verbose_name_plural': 'entries'},
        ),
        migrations.CreateModel(
            name='BasicInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('entry', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='basic_info', to='entries.entry')),
                ('dance_style', models.CharField(blank=True, choices=[('ballroom', 'Ballroom'), ('ballet_contemporary', 'Ballet / contemporary'), ('jazz', 'Jazz'), ('street', 'Street dance')], max_length=32)),
                ('category_division', models.CharField(blank=True, max_length=64)),
                ('representative_name', models.CharField(blank=True, max_length=50)),
                ('representative_furigana', models.CharField(blank=True, max_length=50)),
                ('representative_romaji', models.CharField(blank=True, max_length=100)),
                ('representative_birthdate', models.DateField(blank=True, null=True)),
                ('representative_email', models.CharField(blank=True, max_length=254)),
                ('partner_name', models.CharField(blank=True, max_length=50)),
                ('partner_furigana', models.CharField(blank=True, max_length=50)),
                ('partner_romaji', models.CharField(blank=True, max_length=100)),
                ('partner_birthdate', models.DateField(blank=True, null=True)),
                ('phone_number', models.CharField(blank=True, max_length=20)),
                ('real_name', models.CharField(blank=True, max_length=50)),
                ('real_name_kana', models.CharField(blank=True, max_length=50)),
                ('partner_real_name', models.CharField(blank=True, max_length=50)),
                ('partner_real_name_kana', models.CharField(blank=True, max_length=50)),
                ('emergency_contact_name_1', models.CharField(blank=True, max_length=50)),
                ('emergency_contact_phone_1', models.CharField(blank=True, max_length=20)),
                ('emergency_contact_name_2', models.CharField(blank=True, max_length=50)),
                ('emergency_contact_phone_2', models.CharField(blank=True, max_length=20)),
                ('guardian_name', models.CharField(blank=True, max_length=50)),
                ('guardian_phone', models.CharField(blank=True, max_length=20)),
                ('guardian_email', models.CharField(blank=True, max_length=254)),
                ('partner_guardian_name', models.CharField(blank=True, max_length=50)),
                ('partner_guardian_phone', models.CharField(blank=True, max_length=20)),
                ('partner_guardian_email', models.CharField(blank=True, max_length=254)),
                ('choreographer', models.CharField(blank=True, max_length=50)),
                ('choreographer_furigana', models.CharField(blank=True, max_length=50)),
                ('agreement_checked', models.BooleanField(default=False)),
                ('media_consent_checked', models.BooleanField(default=False)),
                ('privacy_policy_checked', models.BooleanField(default=False)),
            ],
            options={'verbose_name': 'basic information', 'verbose_name_plural': 'basic information'},
        ),
        migrations.CreateModel(
            name='PreliminaryInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('entry', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='preliminary_info', to='entries.entry')),
                ('work_title', models.CharField(blank=True, max_length=100)),
                ('work_title_kana', models.CharField(blank=True, max_length=100)),
                ('work_story', models.TextField(blank=True)),
                ('music_rights_cleared', models.CharField(blank=True, max_length=32)),
                ('music_title', models.CharField(blank=True, max_length=100)),
                ('cd_title', models.CharField(blank=True, max_length=100)),
                ('artist', models.CharField(blank=True, max_length=100)),
                ('record_number', models.CharField(blank=True, max_length=50)),
                ('jasrac_code', models.CharField(blank=True, max_length=50)),
                ('music_type', models.CharField(blank=True, max_length=32)),
                ('choreographer1_name', models.CharField(blank=True, max_length=50)),
                ('choreographer1_furigana', models.CharField(blank=True, max_length=50)),
                ('choreographer2_name', models.CharField(blank=True, max_length=50)),
                ('choreographer2_furigana', models.CharField(blank=True, max_length=50)),
            ],
            options={'verbose_name': 'preliminary information', 'verbose_name_plural': 'preliminary information'},
        ),
        migrations.CreateModel(
            name='SemifinalsInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('work_title', models.CharField(blank=True, max_length=100)),
                ('work_title_kana', models.CharField(blank=True, max_length=100)),
                ('work_character_story', models.CharField(blank=True, max_length=50)),
                ('copyright_permission', models.CharField(blank=True, choices=[('commercial', 'Commercial recording'), ('licensed', 'Licensed by the rights holder'), ('original', 'Original composition')], max_length=16)),
                ('music_title', models.CharField(blank=True, max_length=100)),
                ('cd_title', models.CharField(blank=True, max_length=100)),
                ('artist', models.CharField(blank=True, max_length=100)),
                ('record_number', models.CharField(blank=True, max_length=50)),
                ('jasrac_code', models.CharField(blank=True, max_length=50)),
                ('music_type', models.CharField(blank=True, max_length=32)),
                ('music_usage_method', models.CharField(blank=True, max_length=64)),
                ('sound_start_timing', models.CharField(blank=True, max_length=100)),
                ('chaser_song_designation', models.CharField(blank=True, choices=[('required', 'Separate chaser song'), ('included', 'Included in the music data'), ('not_required', 'No chaser song')], max_length=16)),
                ('fade_out_start_time', models.CharField(blank=True, max_length=16)),
                ('fade_out_complete_time', models.CharField(blank=True, max_length=16)),
                ('dance_start_timing', models.CharField(blank=True, max_length=100)),
                ('scene1_time', models.CharField(blank=True, max_length=16)),
                ('scene1_trigger', models.CharField(blank=True, max_length=100)),
                ('scene1_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('scene1_color_other', models.CharField(blank=True, max_length=100)),
                ('scene1_image', models.CharField(blank=True, max_length=200)),
                ('scene1_notes', models.TextField(blank=True)),
                ('scene2_time', models.CharField(blank=True, max_length=16)),
                ('scene2_trigger', models.CharField(blank=True, max_length=100)),
                ('scene2_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('scene2_color_other', models.CharField(blank=True, max_length=100)),
                ('scene2_image', models.CharField(blank=True, max_length=200)),
                ('scene2_notes', models.TextField(blank=True)),
                ('scene3_time', models.CharField(blank=True, max_length=16)),
                ('scene3_trigger', models.CharField(blank=True, max_length=100)),
                ('scene3_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('scene3_color_other', models.CharField(blank=True, max_length=100)),
                ('scene3_image', models.CharField(blank=True, max_length=200)),
                ('scene3_notes', models.TextField(blank=True)),
                ('scene4_time', models.CharField(blank=True, max_length=16)),
                ('scene4_trigger', models.CharField(blank=True, max_length=100)),
                ('scene4_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('scene4_color_other', models.CharField(blank=True, max_length=100)),
                ('scene4_image', models.CharField(blank=True, max_length=200)),
                ('scene4_notes', models.TextField(blank=True)),
                ('scene5_time', models.CharField(blank=True, max_length=16)),
                ('scene5_trigger', models.CharField(blank=True, max_length=100)),
                ('scene5_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('scene5_color_other', models.CharField(blank=True, max_length=100)),
                ('scene5_image', models.CharField(blank=True, max_length=200)),
                ('scene5_notes', models.TextField(blank=True)),
                ('chaser_exit_time', models.CharField(blank=True, max_length=16)),
                ('chaser_exit_trigger', models.CharField(blank=True, max_length=100)),
                ('chaser_exit_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('chaser_exit_color_other', models.CharField(blank=True, max_length=100)),
                ('chaser_exit_image', models.CharField(blank=True, max_length=200)),
                ('chaser_exit_notes', models.TextField(blank=True)),
                ('choreographer_name', models.CharField(blank=True, max_length=50)),
                ('choreographer_furigana', models.CharField(blank=True, max_length=50)),
                ('choreographer2_name', models.CharField(blank=True, max_length=50)),
                ('choreographer2_furigana', models.CharField(blank=True, max_length=50)),
                ('props_usage', models.CharField(blank=True, choices=[('yes', 'Uses props'), ('no', 'No props')], max_length=8)),
                ('props_details', models.TextField(blank=True)),
                ('entry', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='semifinals_info', to='entries.entry')),
                ('music_option', models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage')], max_length=16)),
                ('choreographer_option', models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage')], max_length=16)),
                ('bank_name', models.CharField(blank=True, max_length=100)),
                ('branch_name', models.CharField(blank=True, max_length=100)),
                ('account_type', models.CharField(blank=True, max_length=16)),
                ('account_number', models.CharField(blank=True, max_length=16)),
                ('account_holder', models.CharField(blank=True, max_length=100)),
            ],
            options={'verbose_name': 'semifinals information', 'verbose_name_plural': 'semifinals information'},
        ),
        migrations.CreateModel(
            name='FinalsInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('work_title', models.CharField(blank=True, max_length=100)),
                ('work_title_kana', models.CharField(blank=True, max_length=100)),
                ('work_character_story', models.CharField(blank=True, max_length=50)),
                ('copyright_permission', models.CharField(blank=True, choices=[('commercial', 'Commercial recording'), ('licensed', 'Licensed by the rights holder'), ('original', 'Original composition')], max_length=16)),
                ('music_title', models.CharField(blank=True, max_length=100)),
                ('cd_title', models.CharField(blank=True, max_length=100)),
                ('artist', models.CharField(blank=True, max_length=100)),
                ('record_number', models.CharField(blank=True, max_length=50)),
                ('jasrac_code', models.CharField(blank=True, max_length=50)),
                ('music_type', models.CharField(blank=True, max_length=32)),
                ('music_usage_method', models.CharField(blank=True, max_length=64)),
                ('sound_start_timing', models.CharField(blank=True, max_length=100)),
                ('chaser_song_designation', models.CharField(blank=True, choices=[('required', 'Separate chaser song'), ('included', 'Included in the music data'), ('not_required', 'No chaser song')], max_length=16)),
                ('fade_out_start_time', models.CharField(blank=True, max_length=16)),
                ('fade_out_complete_time', models.CharField(blank=True, max_length=16)),
                ('dance_start_timing', models.CharField(blank=True, max_length=100)),
                ('scene1_time', models.CharField(blank=True, max_length=16)),
                ('scene1_trigger', models.CharField(blank=True, max_length=100)),
                ('scene1_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('scene1_color_other', models.CharField(blank=True, max_length=100)),
                ('scene1_image', models.CharField(blank=True, max_length=200)),
                ('scene1_notes', models.TextField(blank=True)),
                ('scene2_time', models.CharField(blank=True, max_length=16)),
                ('scene2_trigger', models.CharField(blank=True, max_length=100)),
                ('scene2_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('scene2_color_other', models.CharField(blank=True, max_length=100)),
                ('scene2_image', models.CharField(blank=True, max_length=200)),
                ('scene2_notes', models.TextField(blank=True)),
                ('scene3_time', models.CharField(blank=True, max_length=16)),
                ('scene3_trigger', models.CharField(blank=True, max_length=100)),
                ('scene3_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('scene3_color_other', models.CharField(blank=True, max_length=100)),
                ('scene3_image', models.CharField(blank=True, max_length=200)),
                ('scene3_notes', models.TextField(blank=True)),
                ('scene4_time', models.CharField(blank=True, max_length=16)),
                ('scene4_trigger', models.CharField(blank=True, max_length=100)),
                ('scene4_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('scene4_color_other', models.CharField(blank=True, max_length=100)),
                ('scene4_image', models.CharField(blank=True, max_length=200)),
                ('scene4_notes', models.TextField(blank=True)),
                ('scene5_time', models.CharField(blank=True, max_length=16)),
                ('scene5_trigger', models.CharField(blank=True, max_length=100)),
                ('scene5_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('scene5_color_other', models.CharField(blank=True, max_length=100)),
                ('scene5_image', models.CharField(blank=True, max_length=200)),
                ('scene5_notes', models.TextField(blank=True)),
                ('chaser_exit_time', models.CharField(blank=True, max_length=16)),
                ('chaser_exit_trigger', models.CharField(blank=True, max_length=100)),
                ('chaser_exit_color_type', models.CharField(blank=True, choices=[('warm', 'Warm colours'), ('cool', 'Cool colours'), ('other', 'Other (specify)')], max_length=8)),
                ('chaser_exit_color_other', models.CharField(blank=True, max_length=100)),
                ('chaser_exit_image', models.CharField(blank=True, max_length=200)),
                ('chaser_exit_notes', models.TextField(blank=True)),
                ('choreographer_name', models.CharField(blank=True, max_length=50)),
                ('choreographer_furigana', models.CharField(blank=True, max_length=50)),
                ('choreographer2_name', models.CharField(blank=True, max_length=50)),
                ('choreographer2_furigana', models.CharField(blank=True, max_length=50)),
                ('props_usage', models.CharField(blank=True, choices=[('yes', 'Uses props'), ('no', 'No props')], max_length=8)),
                ('props_details', models.TextField(blank=True)),
                ('entry', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='finals_info', to='entries.entry')),
                ('music_option', models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage')], max_length=16)),
                ('sound_option', models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage')], max_length=16)),
                ('lighting_option', models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage')], max_length=16)),
                ('choreographer_option', models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage')], max_length=16)),
                ('choreographer_attendance', models.CharField(blank=True, max_length=32)),
                ('choreographer_photo_permission', models.CharField(blank=True, max_length=32)),
            ],
            options={'verbose_name': 'finals information', 'verbose_name_plural': 'finals information'},
        ),
        migrations.CreateModel(
            name='ApplicationsInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('entry', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='applications_info', to='entries.entry')),
                ('related_ticket_count', models.PositiveSmallIntegerField(default=0, validators=[django.core.validators.MaxValueValidator(5)])),
                ('related1_relationship', models.CharField(blank=True, max_length=50)),
                ('related1_name', models.CharField(blank=True, max_length=50)),
                ('related1_furigana', models.CharField(blank=True, max_length=50)),
                ('related2_relationship', models.CharField(blank=True, max_length=50)),
                ('related2_name', models.CharField(blank=True, max_length=50)),
                ('related2_furigana', models.CharField(blank=True, max_length=50)),
                ('related3_relationship', models.CharField(blank=True, max_length=50)),
                ('related3_name', models.CharField(blank=True, max_length=50)),
                ('related3_furigana', models.CharField(blank=True, max_length=50)),
                ('related4_relationship', models.CharField(blank=True, max_length=50)),
                ('related4_name', models.CharField(blank=True, max_length=50)),
                ('related4_furigana', models.CharField(blank=True, max_length=50)),
                ('related5_relationship', models.CharField(blank=True, max_length=50)),
                ('related5_name', models.CharField(blank=True, max_length=50)),
                ('related5_furigana', models.CharField(blank=True, max_length=50)),
                ('related_ticket_total_amount', models.PositiveIntegerField(blank=True, null=True)),
                ('companion1_name', models.CharField(blank=True, max_length=50)),
                ('companion1_furigana', models.CharField(blank=True, max_length=50)),
                ('companion1_purpose', models.CharField(blank=True, max_length=100)),
                ('companion2_name', models.CharField(blank=True, max_length=50)),
                ('companion2_furigana', models.CharField(blank=True, max_length=50)),
                ('companion2_purpose', models.CharField(blank=True, max_length=100)),
                ('companion3_name', models.CharField(blank=True, max_length=50)),
                ('companion3_furigana', models.CharField(blank=True, max_length=50)),
                ('companion3_purpose', models.CharField(blank=True, max_length=100)),
                ('companion_total_amount', models.PositiveIntegerField(blank=True, null=True)),
                ('makeup_preferred_stylist', models.CharField(blank=True, max_length=50)),
                ('makeup_name', models.CharField(blank=True, max_length=50)),
                ('makeup_email', models.CharField(blank=True, max_length=254)),
                ('makeup_phone', models.CharField(blank=True, max_length=20)),
                ('makeup_notes', models.TextField(blank=True)),
                ('applications_notes', models.TextField(blank=True)),
            ],
            options={'verbose_name': 'applications information', 'verbose_name_plural': 'applications information'},
        ),
        migrations.CreateModel(
            name='SnsInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('entry', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='sns_info', to='entries.entry')),
                ('sns_notes', models.TextField(blank=True)),
            ],
            options={'verbose_name': 'SNS information', 'verbose_name_plural': 'SNS information'},
        ),
        migrations.CreateModel(
            name='FileAttachment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role', models.CharField(choices=[('preliminary_video', 'Preliminary video'), ('semifinals_music', 'Semifinals music data'), ('semifinals_chaser_song', 'Semifinals chaser song'), ('semifinals_scene1_image', 'Semifinals scene 1 image'), ('semifinals_scene2_image', 'Semifinals scene 2 image'), ('semifinals_scene3_image', 'Semifinals scene 3 image'), ('semifinals_scene4_image', 'Semifinals scene 4 image'), ('semifinals_scene5_image', 'Semifinals scene 5 image'), ('semifinals_chaser_exit_image', 'Semifinals chaser/exit image'), ('bank_slip', 'Entry fee bank slip'), ('finals_music', 'Finals music data'), ('finals_chaser_song', 'Finals chaser song'), ('finals_scene1_image', 'Finals scene 1 image'), ('finals_scene2_image', 'Finals scene 2 image'), ('finals_scene3_image', 'Finals scene 3 image'), ('finals_scene4_image', 'Finals scene 4 image'), ('finals_scene5_image', 'Finals scene 5 image'), ('finals_chaser_exit_image', 'Finals chaser/exit image'), ('finals_choreographer_photo', 'Finals choreographer photo'), ('payment_slip', 'Ticket payment slip'), ('sns_practice_video', 'SNS practice video'), ('sns_introduction_highlight', 'SNS introduction highlight')], max_length=48)),
                ('file_type', models.CharField(choices=[('music', 'Music'), ('audio', 'Audio'), ('photo', 'Photo'), ('video', 'Video')], max_length=8)),
                ('file_name', models.CharField(max_length=255)),
                ('file_path', models.CharField(max_length=500)),
                ('file_size', models.PositiveBigIntegerField(blank=True, null=True)),
                ('mime_type', models.CharField(blank=True, max_length=100)),
                ('uploaded_at', models.DateTimeField(auto_now_add=True)),
                ('entry', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attachments', to='entries.entry')),
            ],
            options={
                'ordering': ('entry', 'role'),
                'constraints': [models.UniqueConstraint(fields=('entry', 'role'), name='unique_attachment_per_role')],
            },
        ),
        migrations.CreateModel(
            name='Selection',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('score', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(10)])),
                ('comments', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('pending', 'Awaiting selection'), ('submitted', 'Submitted'), ('selected', 'Selected'), ('rejected', 'Not selected')], default='pending', max_length=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('entry', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='selection', to='entries.entry')),
                ('reviewer', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='selections', to=settings.AUTH_USER_MODEL)),
            ],
            options={'ordering': ('-updated_at',)},
        ),
        migrations.CreateModel(
            name='Setting',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('key', models.CharField(max_length=100, unique=True)),
                ('value', models.TextField(blank=True)),
                ('description', models.CharField(blank=True, max_length=255)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={'ordering': ('key',)},
        ),
    ]
