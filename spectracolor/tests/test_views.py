import json
from unittest import mock
from django.test import SimpleTestCase

from ..config.settings import Settings
from ..shared.utils.parsing import EXAMPLE_SPECTRAL_DATA

FLAT_SPECTRUM = "\n".join(f"{wl} 1" for wl in range(380, 781))
GROUPED = "400 1 0.9\n500 1 0.9\n600 1 0.9\n400 2 0.1\n500 2 0.5\n600 2 0.9"


class OptionsViewTest(SimpleTestCase):

    def test_options(self):
        response = self.client.get("/api/v1/options")
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        assert payload["illuminants"] == ["A", "C", "D50", "D55", "D65", "D75", "E", "F2", "F11"]
        assert payload["observers"] == ["2", "10"]
        assert payload["defaults"] == {"illuminant": "D65", "observer": "2", "applyGammaCorrection": True}
        assert payload["exampleData"] == EXAMPLE_SPECTRAL_DATA

    def test_options_rejects_post(self):
        response = self.client.post("/api/v1/options")
        self.assertEqual(response.status_code, 405)


class ParseViewTest(SimpleTestCase):

    def post_json(self, body):
        return self.client.post("/api/v1/parse", data=json.dumps(body), content_type="application/json")

    def test_parse(self):
        response = self.post_json({"data": GROUPED})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        assert payload["count"] == 6
        assert payload["groups"] == [1, 2]
        assert payload["samples"][0] == {"wavelength": 400.0, "intensity": 0.9, "group": 1}

    def test_parse_form(self):
        response = self.client.post("/api/v1/parse", data={"data": "400 0.1\n410 0.2"})
        self.assertEqual(response.status_code, 200)
        assert response.json()["count"] == 2

    def test_parse_nothing_usable(self):
        response = self.post_json({"data": "not spectral data"})
        self.assertEqual(response.status_code, 200)
        assert response.json() == {"samples": [], "groups": [], "count": 0}

    def test_missing_field(self):
        response = self.post_json({})
        self.assertEqual(response.status_code, 422)
        assert "data" in response.json()["detail"]

    def test_get_not_allowed(self):
        response = self.client.get("/api/v1/parse")
        self.assertEqual(response.status_code, 405)


class ConvertViewTest(SimpleTestCase):

    def post_json(self, body):
        return self.client.post("/api/v1/convert", data=json.dumps(body), content_type="application/json")

    def test_convert_flat_spectrum(self):
        response = self.post_json({"data": FLAT_SPECTRUM})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        assert payload["sampleCount"] == 401
        assert payload["groups"] == []
        result = payload["results"][0]
        assert result["hex"] == "#fff9f4"
        assert result["rgb"] == [255, 249, 244]
        assert result["normalizedHex"] == "#fff9f4"
        assert result["illuminant"] == "D65"
        assert result["observer"] == "2"
        assert result["group"] is None

    def test_convert_without_gamma(self):
        response = self.post_json({"data": FLAT_SPECTRUM, "applyGammaCorrection": False})
        self.assertEqual(response.status_code, 200)
        assert response.json()["results"][0]["hex"] == "#fff2e8"

    def test_convert_form(self):
        response = self.client.post("/api/v1/convert", data={
            "data": EXAMPLE_SPECTRAL_DATA,
            "illuminant": "d50",
            "observer": "10",
            "applyGammaCorrection": "false",
        })
        self.assertEqual(response.status_code, 200)
        result = response.json()["results"][0]
        assert result["illuminant"] == "D50"
        assert result["observer"] == "10"

    def test_convert_groups(self):
        response = self.post_json({"data": GROUPED})
        payload = response.json()
        assert [r["group"] for r in payload["results"]] == [1, 2]
        assert payload["groups"] == [1, 2]

        response = self.post_json({"data": GROUPED, "group": 2})
        assert [r["group"] for r in response.json()["results"]] == [2]

    def test_missing_group(self):
        response = self.post_json({"data": GROUPED, "group": 9})
        self.assertEqual(response.status_code, 422)
        assert response.json()["detail"].startswith("Group 9 not found")

    def test_no_data(self):
        response = self.post_json({"data": "# empty"})
        self.assertEqual(response.status_code, 422)
        assert response.json() == {"detail": "No valid spectral data found"}

    def test_too_few_points(self):
        response = self.post_json({"data": "500 1"})
        self.assertEqual(response.status_code, 422)
        assert response.json() == {"detail": "At least 2 data points are required"}

    def test_unconvertible(self):
        response = self.post_json({"data": "300 1\n350 1"})
        self.assertEqual(response.status_code, 422)
        assert response.json() == {"detail": "Unable to convert spectrum to color"}

    def test_unknown_illuminant(self):
        response = self.post_json({"data": FLAT_SPECTRUM, "illuminant": "D93"})
        self.assertEqual(response.status_code, 422)
        assert "illuminant" in response.json()["detail"]

    def test_invalid_json(self):
        response = self.client.post("/api/v1/convert", data="{not json", content_type="application/json")
        self.assertEqual(response.status_code, 422)
        assert response.json() == {"detail": "Invalid JSON body"}

    def test_json_array_body(self):
        response = self.client.post("/api/v1/convert", data="[]", content_type="application/json")
        self.assertEqual(response.status_code, 422)

    def test_get_not_allowed(self):
        response = self.client.get("/api/v1/convert")
        self.assertEqual(response.status_code, 405)

    def test_request_too_large(self):
        with mock.patch("spectracolor.views.get_config", return_value=Settings(max_request_size=64)):
            response = self.post_json({"data": FLAT_SPECTRUM})
        self.assertEqual(response.status_code, 413)
        assert "exceeds the limit of 64 bytes" in response.json()["detail"]


class MixedGroupingViewTest(SimpleTestCase):

    def post_json(self, path, body):
        return self.client.post(path, data=json.dumps(body), content_type="application/json")

    def test_convert_keeps_ungrouped_curve(self):
        response = self.post_json("/api/v1/convert", {"data": "400 0.9\n500 0.9\n600 0.9\n700 0.9\n300 1 1\n350 1 1"})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        assert [r["group"] for r in payload["results"]] == [None]
        assert payload["groups"] == [1]
        assert payload["sampleCount"] == 6

    def test_parse_group_zero(self):
        response = self.post_json("/api/v1/parse", {"data": "380 0 0.1\n400 0 0.2\n380 1 0.3\n400 1 0.4"})
        payload = response.json()
        assert payload["count"] == 4
        assert payload["groups"] == [0, 1]
        assert payload["samples"][0] == {"wavelength": 380.0, "intensity": 0.1, "group": 0}
