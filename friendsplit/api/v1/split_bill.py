"""Split-bill form endpoints"""

from fastapi import APIRouter, Depends

from friendsplit.api.deps import get_session
from friendsplit.schemas.forms import SplitBillFormState, SplitBillFormUpdate
from friendsplit.schemas.session import SessionStateResponse
from friendsplit.services.session_service import SplitterSession

router = APIRouter(prefix="/split-bill", tags=["Split bill"])


@router.patch("/form", response_model=SplitBillFormState)
async def update_split_bill_form(
    form_data: SplitBillFormUpdate, session: SplitterSession = Depends(get_session)
):
    """
    Edit the split-bill draft for the selected friend.

    Fields are applied in order bill, user expense, payer. A user expense
    larger than the bill is rejected and the previous value kept.

    Raises:
        409: If no friend is selected
    """
    form = session.require_split_bill_form()

    if form_data.bill is not None:
        form.set_bill(form_data.bill)
    if form_data.paid_by_user is not None:
        form.set_paid_by_user(form_data.paid_by_user)
    if form_data.payer is not None:
        form.set_payer(form_data.payer)

    return SplitBillFormState.model_validate(form)


@router.post("/submit", response_model=SessionStateResponse)
async def submit_split_bill(session: SplitterSession = Depends(get_session)):
    """
    Split the bill with the selected friend.

    Updates the friend's balance and clears the selection. A zero bill or
    zero user expense is ignored and the unchanged state is returned.

    Raises:
        409: If no friend is selected
    """
    session.require_split_bill_form()
    session.submit_split_bill()
    return SessionStateResponse.from_session(session)
