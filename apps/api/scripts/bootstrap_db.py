"""Create the database schema and seed hospitals and doctors for development."""
from __future__ import annotations

import asyncio

import bcrypt
from sqlalchemy import select

from app.core.config import settings
from app.db.session import SessionLocal, create_schema, engine
from app.models import Doctor, Gender, Hospital

HOSPITALS = [
	{
		"name": "St Thomas' Hospital",
		"address": "Westminster Bridge Rd",
		"city": "London",
		"phone": "+44 20 7188 7188",
	},
	{
		"name": "Manchester Royal Infirmary",
		"address": "Oxford Rd",
		"city": "Manchester",
		"phone": "+44 161 276 1234",
	},
	{
		"name": "Royal Infirmary of Edinburgh",
		"address": "51 Little France Cres",
		"city": "Edinburgh",
		"phone": "+44 131 536 1000",
	},
]

DOCTORS = [
	{
		"first_name": "Amelia",
		"last_name": "Hart",
		"email": "amelia.hart@example.org",
		"department": "Cardiology",
		"role": "Consultant",
		"hospital": "St Thomas' Hospital",
		"gender": Gender.FEMALE,
	},
	{
		"first_name": "Rohan",
		"last_name": "Mehta",
		"email": "rohan.mehta@example.org",
		"department": "Cardiology",
		"role": "Registrar",
		"hospital": "St Thomas' Hospital",
		"gender": Gender.MALE,
	},
	{
		"first_name": "Grace",
		"last_name": "Okafor",
		"email": "grace.okafor@example.org",
		"department": "Dermatology",
		"role": "Consultant",
		"hospital": "Manchester Royal Infirmary",
		"gender": Gender.FEMALE,
	},
	{
		"first_name": "Lewis",
		"last_name": "Campbell",
		"email": "lewis.campbell@example.org",
		"department": "General Practice",
		"role": "GP",
		"hospital": "Royal Infirmary of Edinburgh",
		"gender": Gender.MALE,
	},
]

SEED_PASSWORD = "changeme"


async def seed_hospitals() -> None:
	"""Insert demo hospitals that are not present yet, matched by name."""

	async with SessionLocal() as session:
		async with session.begin():
			for hospital_data in HOSPITALS:
				result = await session.execute(select(Hospital).where(Hospital.name == hospital_data["name"]))
				hospital = result.scalar_one_or_none()
				if hospital is None:
					session.add(Hospital(**hospital_data))
				else:
					hospital.address = hospital_data["address"]
					hospital.city = hospital_data["city"]
					hospital.phone = hospital_data["phone"]
					session.add(hospital)


async def seed_doctors() -> None:
	"""Insert or update demo doctors, matched by email."""

	password_hash = bcrypt.hashpw(
		SEED_PASSWORD.encode("utf-8"), bcrypt.gensalt(rounds=settings.password_hash_rounds)
	).decode("utf-8")

	async with SessionLocal() as session:
		async with session.begin():
			for doctor_data in DOCTORS:
				result = await session.execute(select(Doctor).where(Doctor.email == doctor_data["email"]))
				doctor = result.scalar_one_or_none()
				if doctor is None:
					session.add(Doctor(password=password_hash, **doctor_data))
				else:
					doctor.first_name = doctor_data["first_name"]
					doctor.last_name = doctor_data["last_name"]
					doctor.department = doctor_data["department"]
					doctor.role = doctor_data["role"]
					doctor.hospital = doctor_data["hospital"]
					doctor.gender = doctor_data["gender"]
					session.add(doctor)


async def main() -> None:
	await create_schema()
	await seed_hospitals()
	await seed_doctors()
	await engine.dispose()
	print("Database schema ensured and demo hospitals and doctors seeded.")


if __name__ == "__main__":
	asyncio.run(main())
