"""
API v1 Main Router
Aggregates all endpoints into a single router.

Structure (mounted under /api in main.py):
- /auth/* - Registration, login, logout, profile, user administration
- /products/* - Products CRUD
- /category/* - Categories CRUD, active list, search
- /food/* - Food items CRUD and search
- /shoppinList/* - Shopping list CRUD and search
- /budgets/* - Budgets CRUD
- /waste/* - Waste records CRUD with photo upload
- /dashboard - Per-user summary
- /chatbot - Inventory chat assistant
"""

from fastapi import APIRouter

from homestock.api.v1 import auth, products, categories, foods, shopping_list, budgets, waste, dashboard, chatbot


api_router = APIRouter()


# Endpoints: POST /auth/register, /auth/login, /auth/logout, ...
# Register and login need no authentication
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
)

# Per-user resources
# Each router defines its own prefix; all endpoints require authentication
api_router.include_router(products.router)
api_router.include_router(categories.router)
api_router.include_router(foods.router)
api_router.include_router(shopping_list.router)
api_router.include_router(budgets.router)
api_router.include_router(waste.router)

# Read composition over the resources above
api_router.include_router(dashboard.router)
api_router.include_router(chatbot.router)
