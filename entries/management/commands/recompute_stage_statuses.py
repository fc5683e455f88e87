from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from entries import models, services


class Command(BaseCommand):
    """Recalculate the stored stage statuses from the stage records."""

    help = "Re-evaluate every stage of each entry and store the resulting statuses."

    def add_arguments(self, parser):
        parser.add_argument("--entry-id", type=int, action="append", help="Limit to this entry (repeatable)")

    def handle(self, *args, **options):
        entry_ids = options.get("entry_id")
        entries = models.Entry.objects.all()
        if entry_ids:
            entries = entries.filter(pk__in=entry_ids)
            missing = set(entry_ids) - set(entries.values_list("pk", flat=True))
            if missing:
                raise CommandError(f"No entry found with id {', '.join(str(pk) for pk in sorted(missing))}.")

        total = entries.count()
        changed = services.recompute_statuses(entries.iterator())
        self.stdout.write(self.style.SUCCESS(f"Checked {total} entries; {changed} stage statuses changed."))
