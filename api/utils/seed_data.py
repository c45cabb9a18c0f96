"""
Reference data for the RTO record store.

Provides the fixed demo drivers, a generator for additional random drivers,
the violation catalog, the Gujarat district/city hierarchy and the simulated
camera feeds. ``seed_database`` fills each table only when it is empty.
"""

import logging
import random
from datetime import date, timedelta
from typing import Dict, List, Optional

from models.camera import Camera
from models.driver import Driver
from models.violation import Violation
from repositories.camera_repository import CameraRepository
from repositories.driver_repository import DriverRepository
from repositories.location_repository import LocationRepository
from repositories.violation_repository import ViolationRepository

logger = logging.getLogger(__name__)


DEMO_DRIVERS = [
    Driver(
        id="GJ001",
        name="GOVIND CHAUDHARI",
        govt_id_type="Aadhaar",
        govt_id_number="5566-7788-9900",
        license_number="GJ-0120230045678",
        vehicle_number="GJ 02 AB 1234",
        vehicle_type="Two Wheeler",
        father_name="Ramesh Chaudhari",
        dob="1985-06-15",
        blood_group="O+",
        address="12, Gokuldham Society, Visnagar, Gujarat",
        city="Visnagar",
        phone="+91 96646 50787",
        license_expiry="2027-08-22",
        photo="https://randomuser.me/api/portraits/women/44.jpg",
    ),
    Driver(
        id="GJ002",
        name="PRAYAN CHAUDHARI",
        govt_id_type="Aadhaar",
        govt_id_number="9988-7766-5544",
        license_number="GJ-0520200012345",
        vehicle_number="GJ 05 CD 5678",
        vehicle_type="Four Wheeler",
        father_name="Suresh Chaudhari",
        dob="1990-11-23",
        blood_group="A+",
        address="45, Surat Diamond Hub, Surat, Gujarat",
        city="Surat",
        phone="+91 98980 12345",
        license_expiry="2030-12-10",
        photo="https://randomuser.me/api/portraits/men/32.jpg",
    ),
    Driver(
        id="GJ003",
        name="KRIS CHAUDHARY",
        govt_id_type="PAN",
        govt_id_number="ABCDE1234F",
        license_number="GJ-0120210023456",
        vehicle_number="GJ 01 EF 9012",
        vehicle_type="SUV",
        father_name="Mahesh Chaudhary",
        dob="1992-03-08",
        blood_group="B+",
        address="78, Satellite Road, Ahmedabad, Gujarat",
        city="Ahmedabad",
        phone="+91 98765 43210",
        license_expiry="2025-05-20",
        photo="https://randomuser.me/api/portraits/men/45.jpg",
    ),
]

VIOLATIONS = [
    Violation(
        id="V001",
        code="177",
        category="General Offences",
        violation="Riding without helmet",
        fine=1000,
        description="Two-wheeler rider/pillion rider not wearing helmet",
    ),
    Violation(
        id="V002",
        code="184",
        category="Driving Offences",
        violation="Dangerous driving",
        fine=5000,
        description="Driving in a manner dangerous to the public",
    ),
]

# Cities for generated drivers
CITIES = ["Ahmedabad", "Surat", "Vadodara", "Rajkot", "Bhavnagar", "Jamnagar", "Junagadh", "Gandhinagar"]
BLOOD_GROUPS = ["A+", "B+", "AB+", "O+", "A-", "B-", "AB-", "O-"]
VEHICLE_TYPES = ["Two Wheeler", "Four Wheeler", "SUV", "Truck", "Bus"]

GUJARAT_DISTRICTS: Dict[str, List[str]] = {
    "Ahmedabad": ["Ahmedabad", "Dholera", "Sanand", "Bavla", "Dhandhuka", "Viramgam"],
    "Amreli": ["Amreli", "Bagasara", "Dhari", "Lathi", "Rajula", "Savarkundla"],
    "Anand": ["Anand", "Khambhat", "Petlad", "Sojitra", "Umreth", "Tarapur"],
    "Aravalli": ["Modasa", "Bayad", "Bhiloda", "Dhansura", "Malpur", "Meghraj"],
    "Banaskantha": ["Palanpur", "Deesa", "Dhanera", "Tharad", "Ambaji", "Danta"],
    "Bharuch": ["Bharuch", "Ankleshwar", "Jambusar", "Vagra", "Hansot"],
    "Bhavnagar": ["Bhavnagar", "Mahuva", "Palitana", "Sihor", "Gariadhar", "Talaja"],
    "Botad": ["Botad", "Gadhada", "Barvala", "Ranpur"],
    "Chhota Udaipur": ["Chhota Udaipur", "Bodeli", "Pavi Jetpur"],
    "Dahod": ["Dahod", "Jhalod", "Devgadh Baria", "Limkheda"],
    "Dang": ["Ahwa", "Saputara", "Waghai"],
    "Devbhoomi Dwarka": ["Dwarka", "Khambhalia", "Okha", "Bhanvad"],
    "Gandhinagar": ["Gandhinagar", "Kalol", "Dehgam", "Mansa"],
    "Gir Somnath": ["Veraval", "Somnath", "Talala", "Una", "Kodinar"],
    "Jamnagar": ["Jamnagar", "Dhrol", "Jamjodhpur", "Jodiya", "Kalavad"],
    "Junagadh": ["Junagadh", "Keshod", "Mangrol", "Manavadar", "Visavadar"],
    "Kheda": ["Nadiad", "Kheda", "Kapadvanj", "Mehmedabad", "Dakor"],
    "Kutch": ["Bhuj", "Gandhidham", "Anjar", "Mandvi", "Mundra", "Rapar"],
    "Mahisagar": ["Lunawada", "Balasinor", "Santrampur", "Virpur"],
    "Mehsana": ["Mehsana", "Visnagar", "Unjha", "Kadi", "Vadnagar", "Vijapur", "Becharaji"],
    "Morbi": ["Morbi", "Wankaner", "Halvad", "Tankara"],
    "Narmada": ["Rajpipla", "Dediyapada", "Tilakwada"],
    "Navsari": ["Navsari", "Bilimora", "Gandevi", "Chikhli", "Vansda"],
    "Panchmahal": ["Godhra", "Halol", "Kalol", "Shehera"],
    "Patan": ["Patan", "Sidhpur", "Chanasma", "Harij", "Radhanpur"],
    "Porbandar": ["Porbandar", "Ranavav", "Kutiyana"],
    "Rajkot": ["Rajkot", "Gondal", "Jetpur", "Dhoraji", "Upleta", "Jasdan"],
    "Sabarkantha": ["Himmatnagar", "Idar", "Prantij", "Talod", "Khedbrahma"],
    "Surat": ["Surat", "Bardoli", "Vyara", "Olpad", "Mandvi", "Mangrol"],
    "Surendranagar": ["Surendranagar", "Wadhwan", "Dhrangadhra", "Limbdi", "Chotila"],
    "Tapi": ["Vyara", "Songadh", "Valod", "Uchchal"],
    "Vadodara": ["Vadodara", "Padra", "Karjan", "Dabhoi", "Savli", "Waghodia"],
    "Valsad": ["Valsad", "Vapi", "Pardi", "Umbergaon", "Dharampur"],
}

CITY_COORDINATES = {
    "Ahmedabad": (23.0225, 72.5714),
    "Mehsana": (23.5880, 72.3693),
    "Visnagar": (23.6934, 72.5487),
    "Gandhinagar": (23.2156, 72.6369),
    "Surat": (21.1702, 72.8311),
    "Vadodara": (22.3072, 73.1812),
}

CAMERAS = [
    Camera(
        id="rto-main",
        name="RTO Main Gate Camera",
        feeds=[
            "https://images.unsplash.com/photo-1449965408869-eaa3f722e40d?w=800",
            "https://images.unsplash.com/photo-1502877338535-766e1452684a?w=800",
            "https://images.unsplash.com/photo-1486299267070-83823f5448dd?w=800",
        ],
    ),
    Camera(
        id="rto-highway",
        name="Highway Surveillance Camera",
        feeds=[
            "https://images.unsplash.com/photo-1568605117036-5fe5e7bab0b7?w=800",
            "https://images.unsplash.com/photo-1469854523086-cc02fe5d8800?w=800",
        ],
    ),
    Camera(
        id="rto-junction",
        name="Traffic Junction Camera",
        feeds=[
            "https://images.unsplash.com/photo-1502877338535-766e1452684a?w=800",
            "https://images.unsplash.com/photo-1449965408869-eaa3f722e40d?w=800",
        ],
    ),
    Camera(
        id="rto-toll",
        name="Toll Plaza Camera",
        feeds=[
            "https://images.unsplash.com/photo-1486299267070-83823f5448dd?w=800",
            "https://images.unsplash.com/photo-1568605117036-5fe5e7bab0b7?w=800",
        ],
    ),
]


def random_digits(length: int, rng=random) -> str:
    return str(rng.randint(0, 10 ** length - 1)).zfill(length)


def random_date(start: date, end: date, rng=random) -> str:
    return (start + timedelta(days=rng.randint(0, (end - start).days))).isoformat()


def generate_driver(number: int, rng=random) -> Driver:
    """Generate a plausible driver record numbered ``GJ<number>``"""
    city = rng.choice(CITIES)
    plate_letters = "".join(rng.choice("ABCDEFGHIJKLMNOPQRSTUVWXYZ") for _ in range(2))
    return Driver(
        id=f"GJ{number:03d}",
        name=f"Driver {number}",
        govt_id_type="Aadhaar",
        govt_id_number=f"{random_digits(4, rng)}-{random_digits(4, rng)}-{random_digits(4, rng)}",
        license_number=f"GJ-{random_digits(2, rng)}{date.today().year}{random_digits(7, rng)}",
        vehicle_number=f"GJ {random_digits(2, rng)} {plate_letters} {random_digits(4, rng)}",
        vehicle_type=rng.choice(VEHICLE_TYPES),
        father_name=f"Father of Driver {number}",
        dob=random_date(date(1970, 1, 1), date(2000, 1, 1), rng),
        blood_group=rng.choice(BLOOD_GROUPS),
        address=f"Random Address {number}, {city}",
        city=city,
        phone=f"+91 {rng.randint(9000000000, 9999999999)}",
        license_expiry=random_date(date(2026, 1, 1), date(2035, 1, 1), rng),
        photo=f"https://randomuser.me/api/portraits/{rng.choice(['men', 'women'])}/{rng.randint(0, 98)}.jpg",
    )


def generate_drivers(count: int, start: int = len(DEMO_DRIVERS) + 1, rng=random) -> List[Driver]:
    return [generate_driver(start + i, rng) for i in range(count)]


def seed_database(random_drivers: int = 500, rng: Optional[random.Random] = None) -> Dict[str, int]:
    """Seed every empty reference table.

    Args:
        random_drivers: Generated drivers added after the demo drivers
        rng: Random source for generated drivers

    Returns:
        dict: Rows inserted per table
    """
    rng = rng or random.Random()
    stats = {"drivers": 0, "violations": 0, "districts": 0, "cameras": 0}

    driver_repo = DriverRepository()
    if driver_repo.count_all() == 0:
        logger.info("Seeding drivers...")
        stats["drivers"] = driver_repo.create_many(DEMO_DRIVERS + generate_drivers(random_drivers, rng=rng))

    violation_repo = ViolationRepository()
    if violation_repo.count_all() == 0:
        logger.info("Seeding violations...")
        stats["violations"] = violation_repo.create_many(VIOLATIONS)

    location_repo = LocationRepository()
    if location_repo.count_all() == 0:
        logger.info("Seeding location data...")
        for district, cities in GUJARAT_DISTRICTS.items():
            location_repo.create_district(district, [
                (city, *CITY_COORDINATES.get(city, (None, None))) for city in cities
            ])
            stats["districts"] += 1

    camera_repo = CameraRepository()
    if camera_repo.count_all() == 0:
        logger.info("Seeding camera data...")
        stats["cameras"] = camera_repo.create_many(CAMERAS)

    return stats


def clear_database() -> None:
    """Delete all rows from every table."""
    repo = DriverRepository()
    repo.transaction_write([
        (f"DELETE FROM {table}", None)
        for table in ("memos", "analytics", "cities", "districts", "cameras", "violations", "drivers")
    ])
