from protean.exceptions import ObjectNotFoundError

from expirapp.domain import commerce
from expirapp.identity.user.user import User, normalize_email
from expirapp.shared.pagination import Page, paginate


@commerce.repository(part_of=User)
class UserRepository:
    def _live(self):
        return self._dao.query.filter(is_deleted=False)

    def get_live(self, user_id) -> User:
        user = self.get(user_id)
        if user.is_deleted:
            raise ObjectNotFoundError(f"`User` object with identifier `{user_id}` does not exist.")
        return user

    def find_by_email(self, email: str) -> User | None:
        return self._live().filter(email=normalize_email(email)).all().first

    def list_page(self, page: int | None = None, limit: int | None = None) -> Page:
        return paginate(self._live().order_by("registered_at"), page, limit)
