TEACHER_PASSWORD = "chalk-and-board"

# ~0.5 km from the configured classroom
NEAR = {"latitude": 21.2520, "longitude": 81.6120}
# Raipur -> Bhilai, roughly 23 km away
FAR = {"latitude": 21.1938, "longitude": 81.3509}
