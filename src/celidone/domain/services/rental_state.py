"""Rental status transitions."""

from datetime import date
from typing import Optional, Union

from celidone.core.date_helpers import today as local_today
from celidone.core.logging import get_logger
from celidone.domain.entities.rental import (
    Rental,
    RentalAction,
    RentalStatus,
    TransitionResult,
)
from celidone.domain.validation import messages
from celidone.domain.validation.results import ErrorCode

logger = get_logger(__name__)

# Action -> resulting status
TRANSITIONS: dict[RentalAction, RentalStatus] = {
    RentalAction.RETURN: RentalStatus.DEVOLVIDO,
    RentalAction.CANCEL: RentalStatus.CANCELADO,
}

# Statuses from which return/cancel are allowed
OPEN_STATUSES = frozenset({RentalStatus.ATIVO, RentalStatus.ATRASADO})


def _as_status(status: Union[RentalStatus, str]) -> RentalStatus:
    if isinstance(status, RentalStatus):
        return status
    return RentalStatus(str(status).strip().upper())


def _as_action(action: Union[RentalAction, str]) -> RentalAction:
    if isinstance(action, RentalAction):
        return action
    try:
        return RentalAction(str(action).strip().lower())
    except ValueError:
        raise ValueError(
            f"Invalid action: {action}. Must be one of {[a.value for a in RentalAction]}"
        ) from None


class RentalStateMachine:
    """Governs legal status changes of a rental.

    ATIVO is the initial status. "return" leads to DEVOLVIDO and "cancel" to
    CANCELADO, both terminal. ATRASADO is never stored by a transition: it is
    how an ATIVO rental past its expected return date is reported.
    """

    def transition(
        self,
        status: Union[RentalStatus, str],
        action: Union[RentalAction, str],
    ) -> TransitionResult:
        """Compute the status resulting from an action.

        Illegal transitions are reported in the result, not raised.

        Raises:
            ValueError: If status or action is not a known value
        """
        current = _as_status(status)
        action = _as_action(action)

        if current not in OPEN_STATUSES:
            logger.debug(
                "Rejected transition from terminal status",
                status=current.value,
                action=action.value,
            )
            return TransitionResult(
                ok=False,
                status=current,
                error=messages.TERMINAL_STATE.format(status=current.value),
                code=ErrorCode.ILLEGAL_TRANSITION,
            )

        return TransitionResult(ok=True, status=TRANSITIONS[action])

    def allowed_actions(self, status: Union[RentalStatus, str]) -> list[RentalAction]:
        """Actions that can be applied in a status."""
        if _as_status(status) in OPEN_STATUSES:
            return list(TRANSITIONS)
        return []

    def effective_status(self, rental: Rental, today: Optional[date] = None) -> RentalStatus:
        """Status as shown to users.

        An ATIVO rental whose expected return date has passed is reported as
        ATRASADO. The stored status is left untouched.
        """
        today = today or local_today()
        if rental.status == RentalStatus.ATIVO and today > rental.data_dev_prevista:
            return RentalStatus.ATRASADO
        return rental.status

    def is_overdue(self, rental: Rental, today: Optional[date] = None) -> bool:
        return self.effective_status(rental, today) == RentalStatus.ATRASADO

    def apply(
        self,
        rental: Rental,
        action: Union[RentalAction, str],
        today: Optional[date] = None,
        data_dev_efetiva: Optional[date] = None,
    ) -> TransitionResult:
        """Apply an action to a rental, returning an updated copy.

        "return" records the actual return date (today by default). The
        rental and expected return dates are never changed, and the actual
        return date is not checked against the rental date.
        """
        result = self.transition(rental.status, action)
        if not result.ok:
            return result.model_copy(update={"rental": rental})

        action = _as_action(action)
        update: dict = {"status": result.status}
        if action == RentalAction.RETURN:
            update["data_dev_efetiva"] = data_dev_efetiva or today or local_today()

        updated = rental.model_copy(update=update)

        logger.info(
            "Rental status changed",
            rental_id=rental.id,
            action=action.value,
            from_status=rental.status.value,
            to_status=result.status.value,
        )
        return result.model_copy(update={"rental": updated})
