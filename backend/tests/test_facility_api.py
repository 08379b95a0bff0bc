import unittest

from fastapi.testclient import TestClient

from api_app import app
from core.config import FacilityConfig
from facility_api.deps import store

SIX_SLOTS = {
    "slots": [
        {"id": 1, "size": "small"},
        {"id": 2, "size": "medium"},
        {"id": 3, "size": "large"},
        {"id": 4, "size": "medium"},
        {"id": 5, "size": "small"},
        {"id": 6, "size": "large"},
    ],
    "edges": [[1, 4]],
}


class TestFacilityAPI(unittest.TestCase):
    def setUp(self):
        store.reset(FacilityConfig.from_dict(SIX_SLOTS))
        self.client = TestClient(app)

    def test_list_slots(self):
        res = self.client.get("/facility/slots")
        self.assertEqual(res.status_code, 200)
        slots = res.json()["slots"]
        self.assertEqual([s["id"] for s in slots], [1, 2, 3, 4, 5, 6])
        self.assertEqual(slots[0], {"id": 1, "size": "small", "occupied": False, "occupantID": ""})

    def test_park_and_release(self):
        res = self.client.post("/facility/vehicles", json={"vehicleID": "V1", "sizeClass": "small", "vehicleKind": "small"})
        self.assertEqual(res.json(), {"ok": True, "slotIDs": [1], "error": None})

        res = self.client.post("/facility/vehicles", json={"vehicleID": "V2", "sizeClass": "?", "vehicleKind": "bus"})
        self.assertEqual(res.json()["slotIDs"], [2, 3, 4])

        res = self.client.get("/facility/vehicles/V2")
        self.assertEqual(res.json(), {"vehicleID": "V2", "slotIDs": [2, 3, 4]})

        res = self.client.delete("/facility/vehicles/V2")
        self.assertEqual(res.json()["freedSlotIDs"], [2, 3, 4])

        res = self.client.delete("/facility/vehicles/V2")
        body = res.json()
        self.assertFalse(body["ok"])
        self.assertEqual(body["error"]["code"], "NOT_PARKED")

        res = self.client.get("/facility/vehicles/V2")
        self.assertEqual(res.status_code, 404)

    def test_allocation_errors(self):
        self.client.post("/facility/vehicles", json={"vehicleID": "V1", "sizeClass": "small", "vehicleKind": "small"})

        res = self.client.post("/facility/vehicles", json={"vehicleID": "V1", "sizeClass": "small", "vehicleKind": "small"})
        self.assertEqual(res.json()["error"]["code"], "ALREADY_PARKED")

        res = self.client.post("/facility/vehicles", json={"vehicleID": "V2", "sizeClass": "small", "vehicleKind": "truck"})
        self.assertEqual(res.json()["error"]["code"], "INVALID_TYPE")

        self.client.post("/facility/vehicles", json={"vehicleID": "V3", "sizeClass": "small", "vehicleKind": "small"})
        res = self.client.post("/facility/vehicles", json={"vehicleID": "V4", "sizeClass": "small", "vehicleKind": "small"})
        self.assertEqual(res.json()["error"]["code"], "NO_CAPACITY")

    def test_path(self):
        res = self.client.get("/facility/path", params={"src": 2, "dest": 5})
        self.assertEqual(res.json(), {"ok": True, "hops": 1, "route": [2, 5], "error": None})

        res = self.client.get("/facility/path", params={"src": 1, "dest": 9})
        body = res.json()
        self.assertFalse(body["ok"])
        self.assertEqual(body["error"]["code"], "OUT_OF_RANGE")

    def test_unreachable_path(self):
        res = self.client.put("/facility", json={
            "slots": [{"id": 1, "size": "small"}, {"id": 2, "size": "small"}],
            "linear_adjacency": False,
        })
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["total"], 2)

        res = self.client.get("/facility/path", params={"src": 1, "dest": 2})
        self.assertEqual(res.json()["error"]["code"], "UNREACHABLE")

    def test_schedule(self):
        res = self.client.post("/facility/schedule", json={
            "entries": [1, 3, 0, 5, 8, 9],
            "exits": [2, 4, 6, 7, 10, 11],
        })
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["count"], 4)
        self.assertEqual(len(body["selected"]), 4)

        res = self.client.post("/facility/schedule", json={"entries": [1, 2], "exits": [3]})
        self.assertEqual(res.status_code, 422)

    def test_configure_edges_use_slot_numbers(self):
        res = self.client.put("/facility", json={
            "slots": [{"id": i, "size": "small"} for i in range(1, 5)],
            "edges": [[1, 4]],
            "linear_adjacency": False,
        })
        self.assertEqual(res.status_code, 200)

        res = self.client.get("/facility/path", params={"src": 1, "dest": 4})
        self.assertEqual(res.json(), {"ok": True, "hops": 1, "route": [1, 4], "error": None})

        res = self.client.get("/facility/path", params={"src": 3, "dest": 3})
        self.assertEqual(res.json()["hops"], 0)

        res = self.client.put("/facility", json={
            "slots": [{"id": 1, "size": "small"}, {"id": 2, "size": "small"}],
            "edges": [[0, 1]],
        })
        self.assertEqual(res.status_code, 422)
        self.assertEqual(res.json()["detail"]["code"], "INVALID_CONFIG")

    def test_configure_rejects_duplicates(self):
        res = self.client.put("/facility", json={
            "slots": [{"id": 1, "size": "small"}, {"id": 1, "size": "large"}],
        })
        self.assertEqual(res.status_code, 422)
        self.assertEqual(res.json()["detail"]["code"], "DUPLICATE_SLOT")

        # the previous facility is still in place
        res = self.client.get("/facility/summary")
        self.assertEqual(res.json()["total"], 6)


if __name__ == "__main__":
    unittest.main()
