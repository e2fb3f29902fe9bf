"""Main v1 router aggregator"""
from fastapi import APIRouter

from friendsplit.api.v1 import add_friend, friends, split_bill, state

# Create v1 router
api_router = APIRouter()

# Include all v1 routers
api_router.include_router(state.router)
api_router.include_router(friends.router)
api_router.include_router(add_friend.router)
api_router.include_router(split_bill.router)
