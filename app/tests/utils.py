from app.core.security import hash_password
from app.models import AuthUser, Profile


def add_account(db, email: str, password: str, full_name: str, role=None) -> AuthUser:
    user = AuthUser(email=email, password_hash=hash_password(password), full_name=full_name)
    db.add(user)
    db.flush()
    if role is not None:
        db.add(Profile(id=user.id, email=email, full_name=full_name, role=role))
        db.flush()
    return user


def login(client, email: str, password: str) -> dict:
    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
