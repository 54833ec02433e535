"""Django signals for catalog cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from planning.domain import ItemKind
from planning.models import Attraction, Service, Show
from planning.stores.django_store import catalog_item_key, catalog_list_key


def _invalidate(kind: ItemKind, item_id) -> None:
    cache.delete_many([catalog_list_key(kind), catalog_item_key(kind, item_id)])


@receiver([post_save, post_delete], sender=Attraction)
def invalidate_attraction_cache(sender, instance, **kwargs):
    """Invalidate caches when an attraction is saved or deleted."""
    _invalidate(ItemKind.ATTRACTION, instance.pk)


@receiver([post_save, post_delete], sender=Show)
def invalidate_show_cache(sender, instance, **kwargs):
    """Invalidate caches when a show is saved or deleted."""
    _invalidate(ItemKind.SHOW, instance.pk)


@receiver([post_save, post_delete], sender=Service)
def invalidate_service_cache(sender, instance, **kwargs):
    """Invalidate caches when a service is saved or deleted."""
    _invalidate(ItemKind.SERVICE, instance.pk)
