import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('entries', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='entry',
            name='program_info_status',
            field=models.CharField(choices=[('not_started', 'Not started'), ('unregistered', 'In progress'), ('registered', 'Registered')], default='not_started', max_length=16),
        ),
        migrations.AlterField(
            model_name='preliminaryinfo',
            name='music_rights_cleared',
            field=models.CharField(blank=True, choices=[('A', 'Commercial recording registered with JASRAC'), ('B', 'Cleared with the rights holder'), ('C', 'Original composition')], max_length=32),
        ),
        migrations.AlterField(
            model_name='semifinalsinfo',
            name='music_option',
            field=models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage'), ('preliminary', 'Same as preliminary')], max_length=16),
        ),
        migrations.AlterField(
            model_name='semifinalsinfo',
            name='choreographer_option',
            field=models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage'), ('preliminary', 'Same as preliminary')], max_length=16),
        ),
        migrations.AlterField(
            model_name='finalsinfo',
            name='music_option',
            field=models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage'), ('preliminary', 'Same as preliminary')], max_length=16),
        ),
        migrations.AlterField(
            model_name='finalsinfo',
            name='sound_option',
            field=models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage'), ('preliminary', 'Same as preliminary')], max_length=16),
        ),
        migrations.AlterField(
            model_name='finalsinfo',
            name='lighting_option',
            field=models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage'), ('preliminary', 'Same as preliminary')], max_length=16),
        ),
        migrations.AlterField(
            model_name='finalsinfo',
            name='choreographer_option',
            field=models.CharField(blank=True, choices=[('same', 'Same as previous stage'), ('different', 'Different from previous stage'), ('preliminary', 'Same as preliminary')], max_length=16),
        ),
        migrations.AlterField(
            model_name='fileattachment',
            name='role',
            field=models.CharField(choices=[('preliminary_video', 'Preliminary video'), ('program_player_photo', 'Program player photo'), ('program_semifinal_image1', 'Program semifinals image 1'), ('program_semifinal_image2', 'Program semifinals image 2'), ('program_semifinal_image3', 'Program semifinals image 3'), ('program_semifinal_image4', 'Program semifinals image 4'), ('program_final_player_photo', 'Program finals player photo'), ('program_final_image1', 'Program finals image 1'), ('program_final_image2', 'Program finals image 2'), ('program_final_image3', 'Program finals image 3'), ('program_final_image4', 'Program finals image 4'), ('semifinals_music', 'Semifinals music data'), ('semifinals_chaser_song', 'Semifinals chaser song'), ('semifinals_scene1_image', 'Semifinals scene 1 image'), ('semifinals_scene2_image', 'Semifinals scene 2 image'), ('semifinals_scene3_image', 'Semifinals scene 3 image'), ('semifinals_scene4_image', 'Semifinals scene 4 image'), ('semifinals_scene5_image', 'Semifinals scene 5 image'), ('semifinals_chaser_exit_image', 'Semifinals chaser/exit image'), ('bank_slip', 'Entry fee bank slip'), ('finals_music', 'Finals music data'), ('finals_chaser_song', 'Finals chaser song'), ('finals_scene1_image', 'Finals scene 1 image'), ('finals_scene2_image', 'Finals scene 2 image'), ('finals_scene3_image', 'Finals scene 3 image'), ('finals_scene4_image', 'Finals scene 4 image'), ('finals_scene5_image', 'Finals scene 5 image'), ('finals_chaser_exit_image', 'Finals chaser/exit image'), ('finals_choreographer_photo', 'Finals choreographer photo'), ('payment_slip', 'Ticket payment slip'), ('sns_practice_video', 'SNS practice video'), ('sns_introduction_highlight', 'SNS introduction highlight')], max_length=48),
        ),
        migrations.CreateModel(
            name='ProgramInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('song_count', models.CharField(blank=True, choices=[('one', 'One piece (semifinals and finals share the music)'), ('two', 'Two pieces (different music for the finals)')], max_length=8)),
                ('affiliation', models.CharField(blank=True, max_length=100)),
                ('semifinal_story', models.CharField(blank=True, max_length=100)),
                ('semifinal_highlight', models.CharField(blank=True, max_length=50)),
                ('final_affiliation', models.CharField(blank=True, max_length=100)),
                ('final_story', models.CharField(blank=True, max_length=100)),
                ('final_highlight', models.CharField(blank=True, max_length=50)),
                ('notes', models.TextField(blank=True)),
                ('entry', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='program_info', to='entries.entry')),
            ],
            options={
                'verbose_name': 'program information',
                'verbose_name_plural': 'program information',
            },
        ),
    ]
