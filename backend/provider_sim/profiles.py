"""Fixed simulation profiles for each payment provider."""

from shared.models import ProviderProfile


APPLE_PAY_PROFILE = ProviderProfile(
    provider_id="apple_pay",
    name="Apple Pay",
    latency_ms=800,
    success_rate=0.95,
    success_message="✓ Payment authorized via Apple Pay",
    failure_message="✗ Apple Pay authentication failed",
    transaction_prefix="AP",
)

PAYPAL_PROFILE = ProviderProfile(
    provider_id="paypal",
    name="PayPal",
    latency_ms=1500,
    success_rate=0.90,
    success_message="✓ Payment successful via PayPal",
    failure_message="✗ PayPal payment declined - insufficient funds",
    transaction_prefix="PP",
)

# Bank validation takes longer
CREDIT_CARD_PROFILE = ProviderProfile(
    provider_id="credit_card",
    name="Credit Card",
    latency_ms=2000,
    success_rate=0.85,
    success_message="✓ Credit Card charged successfully",
    failure_message="✗ Credit Card declined - contact your bank",
    transaction_prefix="CC",
)

PROVIDER_PROFILES = {
    profile.provider_id: profile
    for profile in (APPLE_PAY_PROFILE, PAYPAL_PROFILE, CREDIT_CARD_PROFILE)
}
