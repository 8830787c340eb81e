"""Demo admin credentials and password hashing."""

from passlib.context import CryptContext

from storefront.schemas.auth import LoginForm

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=12)

# ---------------------------------------------------------------------------
# Demo admin
# ---------------------------------------------------------------------------

DEMO_ADMIN_NAME = "Demo User"
DEMO_ADMIN_EMAIL = "admin@admin.com"
DEMO_ADMIN_PASSWORD = "demoproject123"


def demo_login_form() -> LoginForm:
    """Return the values the admin login page is pre-filled with.

    They match the admin user written by the seeder, so the demo can be
    entered with a single click.
    """
    return LoginForm(email=DEMO_ADMIN_EMAIL, password=DEMO_ADMIN_PASSWORD, remember=True)


# ---------------------------------------------------------------------------
# Password
# ---------------------------------------------------------------------------


def hash_password(password: str) -> str:
    """Return a bcrypt hash of *password* using 12 cost rounds."""
    return _pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Return True if *password* matches *password_hash*."""
    return _pwd_context.verify(password, password_hash)
