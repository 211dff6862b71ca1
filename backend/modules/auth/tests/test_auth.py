import pytest
from fastapi import status

from core.config import Settings
from core.exceptions import AuthenticationError, ConflictError, InvalidInputError
from ..models.user_models import User
from ..schemas.auth_schemas import UserLogin, UserRegister
from ..services.auth_service import AuthService, hash_password, verify_password


def registration(**overrides):
    data = {
        "email": "Chef@Bistro-Mail.com",
        "password": "s3cure-pass",
        "firstName": "Julia",
        "lastName": "Child",
    }
    data.update(overrides)
    return data


class TestPasswordHashing:
    def test_hash_round_trip(self):
        hashed = hash_password("correct horse")

        assert hashed != "correct horse"
        assert hashed.startswith("$argon2")
        assert verify_password("correct horse", hashed)
        assert not verify_password("wrong horse", hashed)

    def test_unknown_hash_format_does_not_verify(self):
        assert verify_password("anything", "plain-text") is False


class TestAuthService:
    @pytest.fixture
    def auth_service(self, db_session, settings):
        return AuthService(db_session, settings=settings)

    def test_register_stores_hash_and_customer_role(self, auth_service, db_session):
        user = auth_service.register(UserRegister.model_validate(registration()))

        stored = db_session.get(User, user.id)
        assert stored.role == "customer"
        assert stored.password_hash != "s3cure-pass"
        assert stored.email == "Chef@bistro-mail.com"

    def test_duplicate_email(self, auth_service):
        auth_service.register(UserRegister.model_validate(registration()))

        with pytest.raises(ConflictError, match="Email already exists"):
            auth_service.register(UserRegister.model_validate(registration()))

    def test_short_password(self, auth_service):
        with pytest.raises(InvalidInputError, match="at least 8 characters"):
            auth_service.register(UserRegister.model_validate(registration(password="short")))

    def test_minimum_length_is_configurable(self, db_session):
        service = AuthService(db_session, settings=Settings(_env_file=None, min_password_length=4))

        user = service.register(UserRegister.model_validate(registration(password="four")))

        assert user.id is not None

    def test_invalid_email(self, auth_service):
        with pytest.raises(InvalidInputError, match="valid email"):
            auth_service.register(UserRegister.model_validate(registration(email="chef-at-bistro")))

    def test_authenticate(self, auth_service):
        auth_service.register(UserRegister.model_validate(registration()))

        user = auth_service.authenticate(
            UserLogin(email="Chef@Bistro-Mail.com", password="s3cure-pass")
        )

        assert user.first_name == "Julia"

    @pytest.mark.parametrize(
        "email, password",
        [
            ("Chef@Bistro-Mail.com", "wrong-pass"),
            ("nobody@bistro-mail.com", "s3cure-pass"),
            ("not an email", "s3cure-pass"),
        ],
    )
    def test_bad_credentials(self, auth_service, email, password):
        auth_service.register(UserRegister.model_validate(registration()))

        with pytest.raises(AuthenticationError):
            auth_service.authenticate(UserLogin(email=email, password=password))


class TestAuthAPI:
    def test_register(self, client):
        response = client.post("/api/auth/register", json=registration())

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["role"] == "customer"
        assert isinstance(body["userId"], int)
        assert "password" not in body and "passwordHash" not in body

    def test_register_duplicate(self, client):
        client.post("/api/auth/register", json=registration())

        response = client.post("/api/auth/register", json=registration())

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error"] == "Email already exists"

    def test_login_returns_profile(self, client):
        client.post("/api/auth/register", json=registration())

        response = client.post(
            "/api/auth/login", json={"email": "Chef@Bistro-Mail.com", "password": "s3cure-pass"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "userId": response.json()["userId"],
            "email": "Chef@bistro-mail.com",
            "firstName": "Julia",
            "lastName": "Child",
            "role": "customer",
        }

    def test_login_failure(self, client):
        response = client.post(
            "/api/auth/login", json={"email": "ghost@bistro-mail.com", "password": "whatever1"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "Invalid credentials"
