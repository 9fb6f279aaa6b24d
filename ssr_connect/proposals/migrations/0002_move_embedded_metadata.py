from django.db import migrations

from ssr_connect.proposals.metadata import MARKER_PREFIX
from ssr_connect.proposals.metadata import extract_metadata


def move_embedded_metadata(apps, schema_editor):
    """Move METADATA markers from content into the metadata column."""
    Proposal = apps.get_model("proposals", "Proposal")
    for proposal in Proposal.objects.filter(content__contains=MARKER_PREFIX).iterator():
        content, embedded = extract_metadata(proposal.content)
        metadata = {**(embedded or {}), **(proposal.metadata or {})}
        # update() skips the protected FSM field and the modified timestamp
        Proposal.objects.filter(pk=proposal.pk).update(content=content, metadata=metadata)


class Migration(migrations.Migration):
    dependencies = [
        ("proposals", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(move_embedded_metadata, migrations.RunPython.noop),
    ]
