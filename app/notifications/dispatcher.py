from app.database.models import CategoryRecord
from app.database.repositories.notifications_repository import NotificationsRepository
from app.database.repositories.user_roles_repository import UserRolesRepository
from app.logging.logger import Log
from app.notifications.exceptions import NotificationError

NOTIFICATION_TYPE = "info"


class NotificationDispatcher:
    """Alerts every active user in a category's target roles about a new document.

    There is no deduplication: each call notifies every eligible user again.
    """

    def __init__(
        self,
        user_roles_repo: UserRolesRepository,
        notifications_repo: NotificationsRepository,
    ) -> None:
        self._user_roles_repo = user_roles_repo
        self._notifications_repo = notifications_repo

    def dispatch(
        self,
        document_id: str,
        file_name: str,
        category: CategoryRecord,
        uploader_id: str,
    ) -> int:
        """Create one notification per eligible user, excluding the uploader.

        Returns:
            Number of notifications created.

        Raises:
            NotificationError: if the recipients cannot be looked up.
        """
        if not category.target_roles:
            return 0
        try:
            user_ids = self._user_roles_repo.find_active_user_ids(category.target_roles)
        except Exception as exc:
            raise NotificationError(f"Could not resolve notification recipients: {exc}") from exc

        title = f"New {category.name}"
        message = f"{file_name} has been uploaded and is ready for review."
        created = 0
        for user_id in user_ids:
            if user_id == uploader_id:
                continue
            try:
                self._notifications_repo.create(
                    user_id, title, message, NOTIFICATION_TYPE, document_id
                )
            except Exception as exc:
                Log.warning(f"Could not notify user {user_id} about document {document_id}: {exc}")
                continue
            created += 1

        Log.info(f"Sent {created} notifications for document {document_id}")
        return created
