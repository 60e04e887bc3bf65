"""Signal handlers for staff accounts.

Outstanding refresh tokens are blacklisted when a user is deleted so a
removed account cannot mint new access tokens.
"""

import logging

from django.conf import settings
from django.db.models.signals import pre_delete
from django.dispatch import receiver
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken, OutstandingToken

logger = logging.getLogger(__name__)


# Runs in pre_delete so the OutstandingToken rows still exist.
@receiver(pre_delete, sender=settings.AUTH_USER_MODEL)
def blacklist_user_tokens_on_delete(sender, instance, **kwargs):
    tokens = OutstandingToken.objects.filter(user_id=instance.pk)
    count = 0
    for t in tokens:
        _, created = BlacklistedToken.objects.get_or_create(token=t)
        count += int(created)
    if count:
        logger.info(f"Blacklisted {count} refresh token(s) for deleted user {instance.email}")
