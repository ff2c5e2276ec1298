"""
Общие фикстуры тестов
"""

import copy

import pytest


USERS_SPEC = {
    "openapi": "3.0.0",
    "info": {
        "title": "Users API",
        "version": "2.1.0",
        "description": "Сервис пользователей",
    },
    "servers": [{"url": "https://api.example.com"}],
    "paths": {
        "/users": {
            "get": {
                "operationId": "getUsers",
                "tags": ["UserController"],
                "summary": "List users",
                "responses": {
                    "default": {
                        "description": "OK",
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/User"}
                            }
                        },
                    }
                },
            },
            "post": {
                "operationId": "Controller_create",
                "tags": ["UserController"],
                "requestBody": {
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/CreateUserDto"}
                        }
                    }
                },
            },
        },
        "/users/{id}": {
            "parameters": [
                {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
            ],
            "put": {
                "operationId": "updateUser",
                "tags": ["UserController"],
                "summary": "Update user",
                "requestBody": {
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/CreateUserDto"}
                        }
                    }
                },
                "responses": {
                    "default": {
                        "description": "OK",
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/User"}
                            }
                        },
                    }
                },
            },
        },
        "/health": {
            "get": {
                "operationId": "health",
                "responses": {"200": {"description": "OK"}},
            }
        },
    },
    "components": {
        "schemas": {
            "User": {
                "type": "object",
                "properties": {
                    "id": {"type": "number"},
                    "name": {"type": "string"},
                    "role": {"type": "string", "enum": ["admin", "user"]},
                },
                "required": ["id"],
            },
            "CreateUserDto": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "tags": {"type": "array", "items": {"type": "string"}},
                },
                "required": ["name"],
            },
        }
    },
}


class MemoryWriter:
    """Запись файлов в память вместо диска"""

    def __init__(self):
        self.files = {}

    async def write(self, directory, filename, content):
        path = f"{directory}/{filename}"
        self.files[path] = content
        return path


class FakeBuildRunner:
    def __init__(self, result=True):
        self.result = result
        self.calls = []

    def build(self, directory):
        self.calls.append(directory)
        return self.result


@pytest.fixture
def users_spec():
    return copy.deepcopy(USERS_SPEC)


@pytest.fixture
def memory_writer():
    return MemoryWriter()


@pytest.fixture
def build_runner():
    return FakeBuildRunner()
