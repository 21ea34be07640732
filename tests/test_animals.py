"""
Tests para endpoints de animales
"""
import base64

from fastapi import status

def _seed(animal_repository):
    animal_repository.animals.extend([
        {"id": "a1", "name": "Rex", "type": "dog", "gender": "male", "owner_id": "u1",
         "available": True, "images": [{"image_data": b"rex"}]},
        {"id": "a2", "name": "Luna", "type": "cat", "gender": "female", "owner_id": "u2",
         "available": True, "images": [{"image_data": b"luna-1"}, {"image_data": b"luna-2"}]},
        {"id": "a3", "name": "Toby", "type": "dog", "gender": "male", "owner_id": "u2",
         "available": False, "images": []},
    ])

def test_available_requires_auth(client):
    assert client.get("/animals/available").status_code == status.HTTP_401_UNAUTHORIZED

def test_available_excludes_own_animals(client, animal_repository, auth_headers):
    _seed(animal_repository)
    response = client.get("/animals/available", headers=auth_headers("u1"))

    assert response.status_code == status.HTTP_200_OK
    animals = response.json()["animals"]
    assert [a["id"] for a in animals] == ["a2"]
    assert animals[0]["images"] == [
        base64.b64encode(b"luna-1").decode(),
        base64.b64encode(b"luna-2").decode(),
    ]

def test_available_with_filters(client, animal_repository, auth_headers):
    _seed(animal_repository)
    response = client.get("/animals/available", params={"type": "dog", "name": "re"}, headers=auth_headers("u3"))

    assert response.status_code == status.HTTP_200_OK
    assert [a["id"] for a in response.json()["animals"]] == ["a1"]
    assert animal_repository.queries[-1]["animal_type"] == "dog"

def test_create_animal_with_photo(client, animal_repository, auth_headers):
    response = client.post(
        "/animals",
        data={"name": "Rex", "type": "dog", "gender": "male"},
        files=[("images", ("rex.png", b"\x89PNG", "image/png"))],
        headers=auth_headers("u1"),
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["owner_id"] == "u1"
    assert data["images"] == [base64.b64encode(b"\x89PNG").decode()]
    assert animal_repository.animals[0]["images"] == [{"image_data": b"\x89PNG"}]

def test_create_animal_rejects_non_images(client, animal_repository, auth_headers):
    response = client.post(
        "/animals",
        data={"name": "Rex", "type": "dog", "gender": "male"},
        files=[("images", ("doc.pdf", b"%PDF", "application/pdf"))],
        headers=auth_headers("u1"),
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert animal_repository.animals == []
