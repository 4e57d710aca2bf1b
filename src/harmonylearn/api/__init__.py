"""HTTP routers for the HarmonyLearn API."""
