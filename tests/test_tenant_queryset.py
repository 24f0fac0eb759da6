import pytest

from apps.core.tenant import (
    TenantResolutionError,
    clear_current_union,
    get_current_union,
    set_current_union,
)
from apps.support.alimtalk.models import AlimtalkLog

pytestmark = pytest.mark.django_db


@pytest.fixture
def logs(union, other_union):
    AlimtalkLog.objects.create(union=union, title="A")
    AlimtalkLog.objects.create(union=other_union, title="B")


def test_for_union_none_is_empty(logs):
    assert AlimtalkLog.objects.for_union(None).count() == 0


def test_for_current_tenant_follows_context(logs, other_union):
    set_current_union(other_union)
    try:
        titles = list(AlimtalkLog.objects.for_current_tenant().values_list("title", flat=True))
    finally:
        clear_current_union()

    assert titles == ["B"]
    assert get_current_union() is None
    assert AlimtalkLog.objects.for_current_tenant().count() == 0


def test_require_tenant_raises_without_context(logs):
    with pytest.raises(TenantResolutionError) as exc:
        AlimtalkLog.objects.require_tenant()

    assert exc.value.code == "tenant_missing"


def test_require_tenant_scopes_to_context(logs, union):
    set_current_union(union)
    try:
        titles = list(AlimtalkLog.objects.require_tenant().values_list("title", flat=True))
    finally:
        clear_current_union()

    assert titles == ["A"]
