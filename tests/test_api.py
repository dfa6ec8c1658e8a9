"""Tests for the settings HTTP API."""
import json

import pytest


@pytest.mark.asyncio
async def test_health(client):
    """Health endpoint returns ok."""
    r = await client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_get_settings_defaults(client):
    """Settings GET is public and includes derived values but not the private key."""
    r = await client.get("/api/settings")
    assert r.status_code == 200
    data = r.json()
    assert data["SiteName"] == "Your site"
    assert data["Theme"] == "Mediawiki"
    assert data["ThemePath"] == "~/Themes/Mediawiki"
    assert data["AllowedFileTypesList"] == ["jpg", "png", "gif"]
    assert "RecaptchaPrivateKey" not in data


@pytest.mark.asyncio
async def test_patch_requires_admin(client):
    r = await client.patch("/api/settings", json={"SiteName": "Nope"})
    assert r.status_code == 401

    r = await client.patch(
        "/api/settings",
        json={"SiteName": "Nope"},
        headers={"Authorization": "Bearer wrong"},
    )
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_patch_settings(client, auth_headers):
    r = await client.patch(
        "/api/settings",
        json={"SiteName": "Test Wiki", "Theme": "Blackbar", "AllowUserSignup": True},
        headers=auth_headers,
    )
    assert r.status_code == 200
    data = r.json()
    assert data["SiteName"] == "Test Wiki"
    assert data["ThemePath"] == "~/Themes/Blackbar"
    assert data["AllowUserSignup"] is True

    r = await client.get("/api/settings")
    assert r.json()["SiteName"] == "Test Wiki"
    assert r.json()["MarkupType"] == "Creole"


@pytest.mark.asyncio
async def test_patch_x_auth_token(client):
    r = await client.patch(
        "/api/settings",
        json={"MarkupType": "Markdown"},
        headers={"X-Auth-Token": "testsecret123"},
    )
    assert r.status_code == 200
    assert r.json()["MarkupType"] == "Markdown"


@pytest.mark.asyncio
async def test_patch_empty_file_types_heals(client, auth_headers):
    r = await client.patch(
        "/api/settings",
        json={"AllowedFileTypes": ""},
        headers=auth_headers,
    )
    assert r.status_code == 200
    assert r.json()["AllowedFileTypes"] == "jpg, png, gif"


@pytest.mark.asyncio
async def test_export_import_round_trip(client, auth_headers):
    await client.patch(
        "/api/settings",
        json={"SiteName": "Exported", "RecaptchaPrivateKey": "secret-key"},
        headers=auth_headers,
    )
    r = await client.get("/api/settings/export", headers=auth_headers)
    assert r.status_code == 200
    backup = r.text
    exported = json.loads(backup)
    assert exported["SiteName"] == "Exported"
    assert exported["RecaptchaPrivateKey"] == "secret-key"
    assert "ThemePath" not in exported

    await client.patch("/api/settings", json={"SiteName": "Changed"}, headers=auth_headers)

    r = await client.post("/api/settings/import", content=backup, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["SiteName"] == "Exported"

    r = await client.get("/api/settings/export", headers=auth_headers)
    assert json.loads(r.text) == exported


@pytest.mark.asyncio
async def test_export_requires_admin(client):
    r = await client.get("/api/settings/export")
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_import_malformed_restores_defaults(client, auth_headers):
    await client.patch("/api/settings", json={"SiteName": "Before"}, headers=auth_headers)
    r = await client.post("/api/settings/import", content="{not valid json", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["SiteName"] == "Your site"


@pytest.mark.asyncio
async def test_import_wrong_types_rejected(client, auth_headers):
    await client.patch("/api/settings", json={"SiteName": "Kept"}, headers=auth_headers)
    r = await client.post(
        "/api/settings/import",
        content='{"AllowUserSignup": "not-a-bool"}',
        headers=auth_headers,
    )
    assert r.status_code == 422

    r = await client.get("/api/settings")
    assert r.json()["SiteName"] == "Kept"


@pytest.mark.asyncio
async def test_patch_null_leaves_field_unchanged(client, auth_headers):
    await client.patch("/api/settings", json={"AllowedFileTypes": "pdf, txt"}, headers=auth_headers)
    r = await client.patch(
        "/api/settings",
        json={"AllowedFileTypes": None, "SiteName": "Renamed"},
        headers=auth_headers,
    )
    assert r.status_code == 200
    data = r.json()
    assert data["AllowedFileTypes"] == "pdf, txt"
    assert data["SiteName"] == "Renamed"
