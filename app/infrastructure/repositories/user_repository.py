"""Token lookups backed by the shopper table."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.infrastructure.models import UserModel


class UserTokenRepository:
    """Resolve push delivery tokens stored on user rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_token(self, user_id: str) -> str | None:
        model = self.session.get(UserModel, user_id)
        if model is None:
            return None
        return model.fcm_token or None

    def list_tokens(self) -> Sequence[tuple[str, str]]:
        """Return ``(user_id, token)`` pairs for every user with a token."""

        query = (
            self.session.query(UserModel.id, UserModel.fcm_token)
            .filter(UserModel.fcm_token.isnot(None))
            .filter(UserModel.fcm_token != "")
            .order_by(UserModel.id)
        )
        return [(user_id, token) for user_id, token in query.all()]

    def set_token(self, user_id: str, token: str | None, *, name: str | None = None) -> None:
        """Create the user when needed and store ``token`` as its current device."""

        model = self.session.get(UserModel, user_id)
        if model is None:
            model = UserModel(id=user_id, name=name)
            self.session.add(model)
        elif name is not None:
            model.name = name
        model.fcm_token = token
        self.session.commit()


__all__ = ["UserTokenRepository"]
