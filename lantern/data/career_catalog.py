"""Built-in career catalog.

Reference data for the default ``CareerCatalog``. Order matters: the scoring
engine breaks score ties by catalog insertion order.
"""

from typing import Tuple

from lantern.schemas.career_schemas import CareerRecord
from lantern.utils.constants import EducationLevel as Edu, Sector


def _career(
    id: str,
    title: str,
    sector: Sector,
    education: Edu,
    salary: float,
    description: str,
    skills: Tuple[str, ...] = (),
    certifications: Tuple[str, ...] = (),
    growth: str = "Average growth",
) -> CareerRecord:
    return CareerRecord(
        id=id,
        title=title,
        sector=sector,
        required_education=education,
        average_salary=salary,
        description=description,
        skills=skills,
        certifications=certifications,
        growth_outlook=growth,
    )


DEFAULT_CAREERS: Tuple[CareerRecord, ...] = (
    # Healthcare
    _career("rn-001", "Registered Nurse", Sector.HEALTHCARE, Edu.ASSOCIATE, 75000,
            "Provide and coordinate patient care in hospitals and clinics.",
            ("patient care", "critical thinking", "communication"), ("NCLEX-RN",),
            "Faster than average (6% growth)"),
    _career("ma-001", "Medical Assistant", Sector.HEALTHCARE, Edu.CERTIFICATE, 37000,
            "Perform administrative and clinical tasks in medical offices.",
            ("patient intake", "medical records"), ("Certified Medical Assistant (CMA)",),
            "Much faster than average (14% growth)"),
    _career("lpn-001", "Licensed Practical Nurse", Sector.HEALTHCARE, Edu.CERTIFICATE, 50000,
            "Provide basic nursing care under the direction of registered nurses.",
            ("patient care", "vital signs"), ("NCLEX-PN",)),
    _career("chw-001", "Community Health Worker", Sector.HEALTHCARE, Edu.CERTIFICATE, 43000,
            "Connect community members with health services and education.",
            ("outreach", "communication")),
    _career("emt-001", "Emergency Medical Technician", Sector.HEALTHCARE, Edu.CERTIFICATE, 38000,
            "Respond to emergency calls and provide pre-hospital medical care.",
            ("emergency care", "calm under pressure"), ("NREMT Certification",)),
    _career("pharm-tech-001", "Pharmacy Technician", Sector.HEALTHCARE, Edu.CERTIFICATE, 37000,
            "Help pharmacists dispense prescription medication.",
            ("attention to detail", "medication safety"), ("CPhT",)),
    _career("pt-001", "Physical Therapist", Sector.HEALTHCARE, Edu.ADVANCED, 95000,
            "Help patients recover movement and manage pain after injury.",
            ("rehabilitation", "anatomy"), ("State PT License",),
            "Much faster than average (15% growth)"),
    _career("physician-001", "Physician", Sector.HEALTHCARE, Edu.ADVANCED, 208000,
            "Diagnose and treat illnesses and injuries.",
            ("diagnosis", "medical knowledge"), ("Medical License", "Board Certification")),

    # Infrastructure and skilled trades
    _career("aero-eng-001", "Aerospace Engineer", Sector.INFRASTRUCTURE, Edu.BACHELOR, 118000,
            "Design, develop, and test aircraft, spacecraft, and related systems.",
            ("engineering design", "physics"), ("Professional Engineer (PE) License",),
            "Faster than average (8% growth)"),
    _career("civil-eng-001", "Civil Engineer", Sector.INFRASTRUCTURE, Edu.BACHELOR, 88000,
            "Design and supervise construction of infrastructure projects.",
            ("structural analysis", "project management"),
            ("Professional Engineer (PE) License", "EIT Certification")),
    _career("mech-eng-001", "Mechanical Engineer", Sector.INFRASTRUCTURE, Edu.BACHELOR, 95000,
            "Design and build mechanical and thermal devices.",
            ("CAD", "thermodynamics"), ("Professional Engineer (PE) License",)),
    _career("elec-eng-001", "Electrical Engineer", Sector.INFRASTRUCTURE, Edu.BACHELOR, 103000,
            "Design and test electrical equipment and power systems.",
            ("circuit design", "mathematics"), ("Professional Engineer (PE) License",)),
    _career("arch-001", "Architect", Sector.INFRASTRUCTURE, Edu.BACHELOR, 82000,
            "Plan and design buildings and other structures.",
            ("design", "CAD"), ("Architect Registration Examination",)),
    _career("elec-001", "Electrician", Sector.INFRASTRUCTURE, Edu.CERTIFICATE, 60000,
            "Install and maintain electrical systems in homes and businesses.",
            ("wiring", "troubleshooting"), ("Journeyman Electrician License",),
            "Faster than average (7% growth)"),
    _career("plumb-001", "Plumber", Sector.INFRASTRUCTURE, Edu.CERTIFICATE, 58000,
            "Install and repair water, gas, and drainage systems.",
            ("pipefitting", "blueprint reading"), ("Journeyman Plumber License",)),
    _career("hvac-001", "HVAC Technician", Sector.INFRASTRUCTURE, Edu.CERTIFICATE, 52000,
            "Install and service heating, ventilation, and cooling systems.",
            ("mechanical systems", "troubleshooting"), ("EPA Section 608",)),
    _career("weld-001", "Welder", Sector.INFRASTRUCTURE, Edu.CERTIFICATE, 47000,
            "Join metal parts using heat and specialized equipment.",
            ("welding", "blueprint reading"), ("AWS Certified Welder",)),
    _career("const-001", "Construction Worker", Sector.INFRASTRUCTURE, Edu.HIGH_SCHOOL, 40000,
            "Perform physical labor on construction sites.",
            ("tools", "teamwork"), ("OSHA 10",)),

    # Technology
    _career("swdev-001", "Software Developer", Sector.TECHNOLOGY, Edu.BACHELOR, 110000,
            "Design and build computer applications and systems.",
            ("programming", "problem solving"), (), "Much faster than average (25% growth)"),
    _career("webdev-001", "Web Developer", Sector.TECHNOLOGY, Edu.ASSOCIATE, 65000,
            "Build and maintain websites and web applications.",
            ("HTML", "JavaScript"), ()),
    _career("cyber-001", "Cybersecurity Specialist", Sector.TECHNOLOGY, Edu.BACHELOR, 85000,
            "Protect computer networks and systems from attacks.",
            ("network security", "risk analysis"), ("CompTIA Security+",),
            "Much faster than average (32% growth)"),
    _career("itsup-001", "IT Support Specialist", Sector.TECHNOLOGY, Edu.CERTIFICATE, 45000,
            "Help people and organizations resolve computer problems.",
            ("troubleshooting", "customer service"), ("CompTIA A+",)),

    # Education
    _career("elem-teach-001", "Elementary School Teacher", Sector.EDUCATION, Edu.BACHELOR, 55000,
            "Teach young students foundational academic and social skills.",
            ("lesson planning", "classroom management"), ("State Teaching License",)),
    _career("para-001", "Paraprofessional Educator", Sector.EDUCATION, Edu.ASSOCIATE, 32000,
            "Support teachers with instruction and classroom needs.",
            ("tutoring", "patience")),
    _career("counselor-001", "School Counselor", Sector.EDUCATION, Edu.ADVANCED, 60000,
            "Guide students through academic and personal decisions.",
            ("counseling", "communication"), ("School Counselor Certification",)),

    # Business
    _career("data-analyst-001", "Data Analyst", Sector.BUSINESS, Edu.BACHELOR, 82000,
            "Turn raw data into insights that guide business decisions.",
            ("statistics", "SQL", "spreadsheets"), (), "Much faster than average (23% growth)"),
    _career("mkt-research-001", "Market Research Analyst", Sector.BUSINESS, Edu.BACHELOR, 68000,
            "Study market conditions to understand customers and products.",
            ("research", "data analysis")),
    _career("admin-001", "Administrative Assistant", Sector.BUSINESS, Edu.CERTIFICATE, 38000,
            "Handle office organization, scheduling, and communication.",
            ("organization", "office software")),
    _career("sales-001", "Sales Representative", Sector.BUSINESS, Edu.HIGH_SCHOOL, 48000,
            "Sell products and services to businesses and consumers.",
            ("persuasion", "relationship building")),

    # Finance
    _career("accountant-001", "Accountant", Sector.FINANCE, Edu.BACHELOR, 78000,
            "Prepare and examine financial records.",
            ("accounting", "attention to detail"), ("Certified Public Accountant (CPA)",)),
    _career("fin-analyst-001", "Financial Analyst", Sector.FINANCE, Edu.BACHELOR, 85000,
            "Evaluate investments and financial performance.",
            ("financial modeling", "spreadsheets"), ("CFA (optional)",)),
    _career("bookkeeper-001", "Bookkeeper", Sector.FINANCE, Edu.CERTIFICATE, 42000,
            "Record financial transactions and maintain accounts.",
            ("bookkeeping", "accuracy"), ("Certified Bookkeeper",)),

    # Creative
    _career("graph-001", "Graphic Designer", Sector.CREATIVE, Edu.ASSOCIATE, 45000,
            "Create visual concepts for print and digital media.",
            ("design software", "typography"), ()),
    _career("photo-001", "Photographer", Sector.CREATIVE, Edu.CERTIFICATE, 38000,
            "Capture images for clients, media, and events.",
            ("photography", "photo editing")),
    _career("writer-001", "Writer", Sector.CREATIVE, Edu.BACHELOR, 69000,
            "Write content for publications, media, and organizations.",
            ("writing", "research")),

    # Public service
    _career("police-001", "Police Officer", Sector.PUBLIC_SERVICE, Edu.CERTIFICATE, 55000,
            "Protect lives and property and enforce laws.",
            ("judgment", "physical fitness"), ("Police Academy Certification",)),
    _career("fire-001", "Firefighter", Sector.PUBLIC_SERVICE, Edu.CERTIFICATE, 52000,
            "Respond to fires and other emergencies.",
            ("emergency response", "physical fitness"), ("Firefighter I/II", "EMT-Basic")),
    _career("dispatch-001", "Emergency Dispatcher", Sector.PUBLIC_SERVICE, Edu.HIGH_SCHOOL, 46000,
            "Answer emergency calls and coordinate responders.",
            ("multitasking", "calm communication")),

    # Agriculture
    _career("vet-tech-001", "Veterinary Technician", Sector.AGRICULTURE, Edu.ASSOCIATE, 38000,
            "Assist veterinarians in caring for animals.",
            ("animal care", "lab procedures"), ("Credentialed Vet Tech",)),
    _career("ag-tech-001", "Agricultural Technician", Sector.AGRICULTURE, Edu.ASSOCIATE, 43000,
            "Support agricultural scientists with testing and crop research.",
            ("field sampling", "equipment")),
    _career("farm-001", "Farm Worker", Sector.AGRICULTURE, Edu.HIGH_SCHOOL, 28000,
            "Plant, cultivate, and harvest crops and care for livestock.",
            ("equipment operation", "stamina")),

    # Transportation
    _career("pilot-001", "Airline Pilot", Sector.TRANSPORTATION, Edu.BACHELOR, 148000,
            "Fly aircraft carrying passengers and cargo.",
            ("navigation", "decision making"), ("Airline Transport Pilot License",)),
    _career("truck-001", "Truck Driver", Sector.TRANSPORTATION, Edu.CERTIFICATE, 48000,
            "Transport goods over short and long distances.",
            ("safe driving", "logistics"), ("Commercial Driver's License (CDL)",)),
    _career("auto-tech-001", "Automotive Technician", Sector.TRANSPORTATION, Edu.CERTIFICATE, 44000,
            "Inspect, maintain, and repair cars and light trucks.",
            ("diagnostics", "mechanical repair"), ("ASE Certification",)),

    # Hospitality
    _career("event-001", "Event Planner", Sector.HOSPITALITY, Edu.BACHELOR, 52000,
            "Coordinate meetings, weddings, and conferences.",
            ("organization", "negotiation")),
    _career("chef-001", "Cook/Chef", Sector.HOSPITALITY, Edu.CERTIFICATE, 35000,
            "Prepare meals and manage kitchen operations.",
            ("cooking", "food safety"), ("ServSafe",)),
    _career("hotel-001", "Hotel Front Desk Clerk", Sector.HOSPITALITY, Edu.HIGH_SCHOOL, 28000,
            "Welcome guests and manage reservations.",
            ("customer service", "communication")),

    # Manufacturing
    _career("cnc-001", "CNC Machinist", Sector.MANUFACTURING, Edu.CERTIFICATE, 48000,
            "Program and operate computer-controlled machine tools.",
            ("machining", "blueprint reading"), ("NIMS Certification",)),
    _career("qual-001", "Quality Control Inspector", Sector.MANUFACTURING, Edu.CERTIFICATE, 42000,
            "Inspect products to ensure they meet standards.",
            ("measurement", "attention to detail")),
    _career("mach-001", "Machine Operator", Sector.MANUFACTURING, Edu.HIGH_SCHOOL, 38000,
            "Set up and run production machinery.",
            ("equipment operation", "safety")),

    # Retail
    _career("store-mgr-001", "Retail Store Manager", Sector.RETAIL, Edu.ASSOCIATE, 48000,
            "Run daily store operations and lead sales teams.",
            ("leadership", "inventory")),
    _career("retail-001", "Retail Sales Associate", Sector.RETAIL, Edu.HIGH_SCHOOL, 26000,
            "Help customers find and buy products.",
            ("customer service", "product knowledge")),
    _career("cashier-001", "Cashier", Sector.RETAIL, Edu.HIGH_SCHOOL, 24000,
            "Process customer purchases and handle payments.",
            ("cash handling", "accuracy")),

    # Legal
    _career("lawyer-001", "Lawyer", Sector.LEGAL, Edu.ADVANCED, 135000,
            "Advise and represent clients in legal matters.",
            ("legal research", "argumentation"), ("Bar Admission",)),
    _career("paralegal-001", "Paralegal", Sector.LEGAL, Edu.ASSOCIATE, 56000,
            "Support lawyers with research and document preparation.",
            ("legal research", "writing"), ("Paralegal Certificate",)),
    _career("court-rep-001", "Court Reporter", Sector.LEGAL, Edu.CERTIFICATE, 60000,
            "Create word-for-word transcripts of legal proceedings.",
            ("stenography", "accuracy"), ("Registered Professional Reporter",)),

    # Science
    _career("research-sci-001", "Research Scientist", Sector.SCIENCE, Edu.ADVANCED, 99000,
            "Design and run experiments to expand scientific knowledge.",
            ("experimental design", "data analysis")),
    _career("env-sci-001", "Environmental Scientist", Sector.SCIENCE, Edu.BACHELOR, 76000,
            "Study and protect the environment and human health.",
            ("field research", "data analysis")),
    _career("lab-tech-001", "Laboratory Technician", Sector.SCIENCE, Edu.ASSOCIATE, 57000,
            "Run tests and maintain equipment in scientific laboratories.",
            ("lab techniques", "accuracy")),
)


__all__ = ["DEFAULT_CAREERS"]
