"""CheckoutRail API - Main application entry point."""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.middleware import CorrelationMiddleware, TimingMiddleware
from checkout_api.routers import cart, checkout, results, health
from checkout_api.services.payment_service import PaymentService
from checkout_api.services.registry import build_default_registry

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger("checkoutrail")


@asynccontextmanager
async def lifespan(app: FastAPI):
    data_dir = os.environ.get("DATA_DIR", "/app/data")
    for d in ["carts", "results"]:
        os.makedirs(os.path.join(data_dir, d), exist_ok=True)

    # Built once and shared by every request
    app.state.registry = build_default_registry()
    app.state.payment_service = PaymentService()
    logger.info(
        f"Checkout API started, payment methods: {', '.join(app.state.registry.labels())}"
    )
    yield
    logger.info("Checkout API shutting down")


app = FastAPI(
    title="CheckoutRail API",
    version="1.0.0",
    description="Checkout with interchangeable simulated payment providers",
    lifespan=lifespan,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom middleware (outermost first in execution order)
app.add_middleware(TimingMiddleware)
app.add_middleware(CorrelationMiddleware)

app.include_router(cart.router, prefix="/cart", tags=["Cart"])
app.include_router(checkout.router, prefix="/checkout", tags=["Checkout"])
app.include_router(results.router, prefix="/payment-result", tags=["Results"])
app.include_router(health.router, tags=["Health"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", 8030)))
