"""Tests for services, versions and versioned configuration objects."""

from __future__ import annotations

import pytest

from adapters.delivery import backend, dictionary, dictionary_item, domain, service, version
from core.errors import (
    MaxExceededItemsError,
    MissingAddressError,
    MissingDictionaryIDError,
    MissingItemKeyError,
    MissingNameError,
    MissingOptionalNameCommentError,
    MissingServiceIDError,
    MissingServiceVersionError,
)


class TestBackend:
    BODY = {
        "name": "origin",
        "address": "example.com",
        "port": 443,
        "use_ssl": True,
        "service_id": "SVC1",
        "version": 2,
    }

    def test_create(self, client, api):
        api.reply(200, self.BODY)

        out = backend.create_backend(
            client,
            backend.CreateBackendInput(
                service_id="SVC1", service_version=2, name="origin", address="example.com", port=443, use_ssl=True
            ),
        )

        assert api.last.url.path == "/service/SVC1/version/2/backend"
        assert api.last_json() == {"name": "origin", "address": "example.com", "port": 443, "use_ssl": True}
        assert out.port == 443
        assert out.use_ssl is True

    @pytest.mark.parametrize(
        ("kwargs", "error"),
        [
            ({}, MissingServiceIDError),
            ({"service_id": "SVC1"}, MissingServiceVersionError),
            ({"service_id": "SVC1", "service_version": 2}, MissingNameError),
            ({"service_id": "SVC1", "service_version": 2, "name": "origin"}, MissingAddressError),
        ],
    )
    def test_create_validation_order(self, client, api, kwargs, error):
        with pytest.raises(error):
            backend.create_backend(client, backend.CreateBackendInput(**kwargs))
        assert api.requests == []

    def test_update_escapes_name(self, client, api):
        api.reply(200, self.BODY)

        backend.update_backend(
            client,
            backend.UpdateBackendInput(service_id="SVC1", service_version=2, name="my/origin", weight=50),
        )

        assert api.last.url.raw_path == b"/service/SVC1/version/2/backend/my%2Forigin"
        assert api.last_json() == {"weight": 50}


class TestDictionary:
    def test_create_and_list(self, client, api):
        body = {"id": "D1", "name": "geo", "write_only": False, "service_id": "SVC1", "version": 1}
        api.reply(200, body).reply(200, [body])

        created = dictionary.create_dictionary(
            client, dictionary.CreateDictionaryInput(service_id="SVC1", service_version=1, name="geo")
        )
        listed = dictionary.list_dictionaries(
            client, dictionary.ListDictionariesInput(service_id="SVC1", service_version=1)
        )

        assert created.dictionary_id == "D1"
        assert listed == [created]

    def test_delete(self, client, api):
        api.reply(200, {"status": "ok"})

        dictionary.delete_dictionary(
            client, dictionary.DeleteDictionaryInput(service_id="SVC1", service_version=1, name="geo")
        )

        assert api.last.url.path == "/service/SVC1/version/1/dictionary/geo"


class TestDictionaryItem:
    def test_create(self, client, api):
        api.reply(200, {"dictionary_id": "D1", "item_key": "US", "item_value": "us-east"})

        out = dictionary_item.create_dictionary_item(
            client,
            dictionary_item.CreateDictionaryItemInput(
                service_id="SVC1", dictionary_id="D1", item_key="US", item_value="us-east"
            ),
        )

        assert api.last.url.path == "/service/SVC1/dictionary/D1/item"
        assert api.last_json() == {"item_key": "US", "item_value": "us-east"}
        assert out.item_value == "us-east"

    @pytest.mark.parametrize(
        ("kwargs", "error"),
        [
            ({}, MissingServiceIDError),
            ({"service_id": "SVC1"}, MissingDictionaryIDError),
            ({"service_id": "SVC1", "dictionary_id": "D1"}, MissingItemKeyError),
        ],
    )
    def test_get_validation_order(self, client, kwargs, error):
        with pytest.raises(error):
            dictionary_item.get_dictionary_item(client, dictionary_item.GetDictionaryItemInput(**kwargs))

    def test_update(self, client, api):
        api.reply(200, {"dictionary_id": "D1", "item_key": "a b", "item_value": "2"})

        dictionary_item.update_dictionary_item(
            client,
            dictionary_item.UpdateDictionaryItemInput(
                service_id="SVC1", dictionary_id="D1", item_key="a b", item_value="2"
            ),
        )

        assert api.last.method == "PUT"
        assert api.last.url.raw_path == b"/service/SVC1/dictionary/D1/item/a%20b"
        assert api.last_json() == {"item_value": "2"}

    def test_list(self, client, api):
        api.reply(200, [])

        dictionary_item.list_dictionary_items(
            client,
            dictionary_item.ListDictionaryItemsInput(service_id="SVC1", dictionary_id="D1", sort="item_key"),
        )

        assert api.last.url.path == "/service/SVC1/dictionary/D1/items"
        assert api.last.url.params["sort"] == "item_key"

    def test_batch_modify_limit(self, client):
        items = [dictionary_item.BatchDictionaryItem(op="upsert", item_key="k", item_value="v")] * 1001

        with pytest.raises(MaxExceededItemsError):
            dictionary_item.batch_modify_dictionary_items(
                client,
                dictionary_item.BatchModifyDictionaryItemsInput(service_id="SVC1", dictionary_id="D1", items=items),
            )


class TestDomain:
    def test_get(self, client, api):
        api.reply(200, {"name": "www.example.com", "comment": "", "service_id": "SVC1", "version": 4})

        out = domain.get_domain(
            client, domain.GetDomainInput(service_id="SVC1", service_version=4, name="www.example.com")
        )

        assert api.last.url.path == "/service/SVC1/version/4/domain/www.example.com"
        assert out.service_version == 4

    def test_update_rename(self, client, api):
        api.reply(200, {"name": "api.example.com"})

        domain.update_domain(
            client,
            domain.UpdateDomainInput(
                service_id="SVC1", service_version=4, name="www.example.com", new_name="api.example.com"
            ),
        )

        assert api.last_json() == {"name": "api.example.com"}


class TestService:
    BODY = {
        "id": "SVC1",
        "name": "web",
        "type": "vcl",
        "versions": [
            {"number": 1, "active": False},
            {"number": 2, "active": True},
            {"number": 3, "active": False},
        ],
    }

    def test_get_derives_active_version(self, client, api):
        api.reply(200, self.BODY)

        out = service.get_service(client, service.GetServiceInput(service_id="SVC1"))

        assert api.last.url.path == "/service/SVC1"
        assert out.service_id == "SVC1"
        assert out.active_version == 2

    def test_update_requires_name_or_comment(self, client, api):
        with pytest.raises(MissingOptionalNameCommentError):
            service.update_service(client, service.UpdateServiceInput(service_id="SVC1"))
        assert api.requests == []

    def test_update(self, client, api):
        api.reply(200, {"id": "SVC1", "name": "web", "comment": "prod"})

        out = service.update_service(client, service.UpdateServiceInput(service_id="SVC1", comment="prod"))

        assert api.last_json() == {"comment": "prod"}
        assert out.comment == "prod"

    def test_list_passes_query(self, client, api):
        api.reply(200, [self.BODY])

        out = service.list_services(client, service.ListServicesInput(page=1, per_page=20))

        assert api.last.url.path == "/service"
        assert dict(api.last.url.params) == {"page": "1", "per_page": "20"}
        assert out[0].name == "web"

    def test_search(self, client, api):
        api.reply(200, self.BODY)

        service.search_service(client, service.SearchServiceInput(name="web"))

        assert api.last.url.path == "/service/search"
        assert api.last.url.params["name"] == "web"


class TestVersion:
    def test_activate(self, client, api):
        api.reply(200, {"number": 3, "service_id": "SVC1", "active": True})

        out = version.activate_version(client, version.ActivateVersionInput(service_id="SVC1", service_version=3))

        assert api.last.method == "PUT"
        assert api.last.url.path == "/service/SVC1/version/3/activate"
        assert out.active is True

    @pytest.mark.parametrize(
        ("func", "action"),
        [
            (version.deactivate_version, "deactivate"),
            (version.clone_version, "clone"),
            (version.lock_version, "lock"),
        ],
    )
    def test_lifecycle_actions(self, client, api, func, action):
        api.reply(200, {"number": 4})

        func(client, version.VersionedInput(service_id="SVC1", service_version=3))

        assert api.last.url.path == f"/service/SVC1/version/3/{action}"

    def test_lifecycle_requires_version(self, client):
        with pytest.raises(MissingServiceVersionError):
            version.clone_version(client, version.CloneVersionInput(service_id="SVC1"))

    def test_latest(self, client, api):
        api.reply(200, [{"number": 1}, {"number": 5}, {"number": 3}])

        out = version.latest_version(client, version.ListVersionsInput(service_id="SVC1"))

        assert api.last.url.path == "/service/SVC1/version"
        assert out.number == 5

    def test_validate(self, client, api):
        api.reply(200, {"status": "error", "msg": "missing backend"})

        ok, msg = version.validate_version(client, version.ValidateVersionInput(service_id="SVC1", service_version=2))

        assert api.last.url.path == "/service/SVC1/version/2/validate"
        assert ok is False
        assert msg == "missing backend"

    def test_create_sends_comment(self, client, api):
        api.reply(200, {"number": 7, "comment": "hotfix"})

        out = version.create_version(client, version.CreateVersionInput(service_id="SVC1", comment="hotfix"))

        assert api.last.method == "POST"
        assert api.last_json() == {"comment": "hotfix"}
        assert out.number == 7
