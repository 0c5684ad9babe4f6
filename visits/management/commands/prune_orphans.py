from django.core.management.base import BaseCommand

from medi.errors import StorageError
from visits.models import Visit
from visits.storage import documents


class Command(BaseCommand):
    help = 'Report stored documents without a visit row and visit rows without a stored document'

    def add_arguments(self, parser):
        parser.add_argument(
            '--delete',
            action='store_true',
            help='Remove stored documents that no visit row references (rows are only reported)'
        )

    def handle(self, *args, **options):
        stored = set(documents.listdir())
        referenced = set(Visit.objects.values_list('document_url', flat=True))

        orphaned_objects = sorted(stored - referenced)
        dangling_rows = Visit.objects.filter(document_url__in=sorted(referenced - stored)).order_by('pk')

        self.stdout.write(f'{len(orphaned_objects)} orphaned document(s), {dangling_rows.count()} visit(s) missing a document')

        for name in orphaned_objects:
            self.stdout.write(f'  object without row: {name}')
        for visit in dangling_rows:
            self.stdout.write(f'  row without object: visit {visit.pk} -> {visit.document_url}')

        if not options['delete']:
            if orphaned_objects:
                self.stdout.write(self.style.WARNING('Run with --delete to remove the orphaned documents.'))
            return

        removed = 0
        for name in orphaned_objects:
            try:
                documents.remove(name)
                removed += 1
            except StorageError as e:
                self.stderr.write(f'Could not remove {name}: {e}')

        self.stdout.write(self.style.SUCCESS(f'Removed {removed} orphaned document(s).'))
