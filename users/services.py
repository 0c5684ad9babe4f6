import logging

from django.db import DatabaseError

from medi.errors import StorageError, StoreError
from visits.storage import avatars, random_object_name
from .models import Profile

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ('name', 'birthday', 'height', 'weight', 'country')


def load_profile(user) -> Profile:
    """The user's profile row, or an unsaved blank one if there is none yet."""
    try:
        return Profile.objects.get(user=user)
    except Profile.DoesNotExist:
        return Profile(user=user)
    except DatabaseError as e:
        logger.warning("Error loading profile for %s: %s", user, e)
        return Profile(user=user)


def save_profile(user, data: dict, avatar_file=None) -> Profile:
    """
    Upsert the profile keyed by user.

    A new avatar is uploaded first; if the row write then fails the new
    avatar object is removed again. Once the row points at the new avatar
    the previous object is removed.
    """
    defaults = {field: data.get(field) for field in PROFILE_FIELDS}
    for field in ('name', 'country'):
        defaults[field] = defaults[field] or ""

    new_avatar = None
    if avatar_file is not None:
        new_avatar = avatars.upload(random_object_name(avatar_file.name), avatar_file)
        defaults['avatar_url'] = new_avatar

    try:
        previous_avatar = Profile.objects.filter(user=user).values_list('avatar_url', flat=True).first()
        profile, created = Profile.objects.update_or_create(user=user, defaults=defaults)
    except DatabaseError as e:
        if new_avatar:
            try:
                avatars.remove(new_avatar)
            except StorageError as undo_error:
                logger.error("Could not remove orphaned avatar %s: %s", new_avatar, undo_error)
        raise StoreError("Could not save profile", cause=e) from e

    if new_avatar and previous_avatar and previous_avatar != new_avatar:
        try:
            avatars.remove(previous_avatar)
        except StorageError as e:
            logger.warning("Could not remove replaced avatar %s: %s", previous_avatar, e)

    logger.info("%s profile for %s", "Created" if created else "Updated", user)
    return profile
