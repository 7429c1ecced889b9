"""The career rule table, in cascade order.

Only the first rule whose guard holds is selected, so position in
``CAREER_RULES`` is part of the behaviour: medical specialties first, then
technology specialties, interdisciplinary blends, and finally the two broad
"general" catch-alls. Thresholds and score constants are the established ones;
change them only together with the collision tests.
"""

from services.career.rules import AllOf, AnyOf, AtLeast, CareerRule, Never, score

# ---------------------------------------------------------------------------
# Medical
# ---------------------------------------------------------------------------

SURGEON = CareerRule(
    key="surgeon",
    title="Surgeon / Surgical Specialist",
    group="medical",
    guard=AtLeast("surgery", 3) | (AtLeast("surgery", 2) & AtLeast("medical_foundation", 2)),
    score=score(85, 98, surgery=4, medical_foundation=2),
    average_salary=400000,
    description="Exceptional fit for surgical specialties and operating room leadership!",
    skill_gaps=(
        "Advanced Surgical Techniques",
        "Minimally Invasive Surgery",
        "Surgical Research",
        "Teaching & Mentoring",
    ),
    recommendations=(
        "Outstanding surgical knowledge and medical foundation",
        "Consider subspecialty training in cardiac, neuro, or orthopedic surgery",
        "4 years medical school + 5-7 years surgical residency required",
        "Average salary: $400,000 - $700,000+ depending on specialty",
    ),
)

PHYSICIAN = CareerRule(
    key="physician",
    title="Physician / Medical Doctor",
    group="medical",
    guard=AnyOf(
        AtLeast("clinical", 3),
        AtLeast("medical_foundation", 5),
        AtLeast("medical_foundation", 3) & AtLeast("clinical", 1),
        AtLeast("medical_foundation", 4),
    ),
    score=score(80, 95, clinical=3, medical_foundation=2),
    average_salary=250000,
    description="Excellent foundation for medical practice and patient care!",
    skill_gaps=(
        "Clinical Diagnosis",
        "Medical Research",
        "Patient Communication",
        "Evidence-Based Medicine",
    ),
    recommendations=(
        "Strong medical knowledge foundation with clinical focus",
        "Choose specialty: Internal Medicine, Family Medicine, Pediatrics, etc.",
        "4 years medical school + 3-7 years residency required",
        "Average salary: $250,000 - $450,000 depending on specialty",
    ),
)

PSYCHIATRIST = CareerRule(
    key="psychiatrist",
    title="Psychiatrist / Mental Health Professional",
    group="medical",
    guard=AtLeast("mental_health", 4) | (AtLeast("mental_health", 3) & AtLeast("medical_foundation", 2)),
    score=score(80, 95, mental_health=4, medical_foundation=2),
    average_salary=220000,
    description="Excellent fit for mental health and behavioral healthcare!",
    skill_gaps=(
        "Psychopharmacology",
        "Therapeutic Techniques",
        "Crisis Intervention",
        "Cultural Competency",
    ),
    recommendations=(
        "Strong foundation in psychology and mental health",
        "MD in Psychiatry: $220k+, PhD in Psychology: $90k+, LCSW: $65k+",
        "Specialization options: Child Psychiatry, Addiction Medicine, Forensic Psychology",
        "Average salary: $90,000 - $250,000 depending on credential",
    ),
)

REGISTERED_NURSE = CareerRule(
    key="registered_nurse",
    title="Registered Nurse (RN)",
    group="medical",
    guard=AtLeast("nursing", 3) | (AtLeast("nursing", 2) & AtLeast("medical_foundation", 2)),
    score=score(85, 95, nursing=4, medical_foundation=2),
    average_salary=85000,
    description="Perfect match for nursing and comprehensive patient care!",
    skill_gaps=(
        "Advanced Practice Nursing",
        "Critical Care",
        "Evidence-Based Practice",
        "Leadership",
    ),
    recommendations=(
        "Excellent nursing foundation and patient care skills",
        "BSN degree strongly recommended for career advancement",
        "Consider specialization: ICU, ER, OR, Pediatrics, or Nurse Practitioner",
        "Average salary: $85,000 - $120,000 (RN), $120,000+ (NP)",
    ),
)

PHARMACIST = CareerRule(
    key="pharmacist",
    title="Pharmacist",
    group="medical",
    guard=AtLeast("pharmacy", 3) | (AtLeast("pharmacy", 2) & AtLeast("medical_foundation", 1)),
    score=score(80, 95, pharmacy=5, medical_foundation=2),
    average_salary=140000,
    description="Outstanding fit for pharmaceutical care and medication expertise!",
    skill_gaps=(
        "Clinical Pharmacology",
        "Pharmaceutical Care",
        "Drug Information",
        "Patient Counseling",
    ),
    recommendations=(
        "Strong pharmaceutical science and chemistry foundation",
        "PharmD (Doctor of Pharmacy) degree required",
        "Specialization options: Clinical, Hospital, Retail, or Industrial Pharmacy",
        "Average salary: $140,000 - $170,000",
    ),
)

DENTIST = CareerRule(
    key="dentist",
    title="Dentist / Dental Specialist",
    group="medical",
    guard=AtLeast("dentistry", 3) | (AtLeast("dentistry", 2) & AtLeast("medical_foundation", 1)),
    score=score(85, 95, dentistry=5, medical_foundation=2),
    average_salary=200000,
    description="Excellent match for dental practice and oral healthcare!",
    skill_gaps=(
        "Advanced Restorative Procedures",
        "Oral Surgery",
        "Practice Management",
        "Digital Dentistry",
    ),
    recommendations=(
        "Strong foundation in dental science and oral health",
        "DDS or DMD degree required (4 years dental school)",
        "Specialization options: Orthodontics, Oral Surgery, Periodontics",
        "Average salary: $200,000 - $300,000+ (specialists earn more)",
    ),
)

PHYSICAL_THERAPIST = CareerRule(
    key="physical_therapist",
    title="Physical Therapist",
    group="medical",
    guard=AtLeast("physical_therapy", 3) | (AtLeast("physical_therapy", 2) & AtLeast("medical_foundation", 1)),
    score=score(85, 95, physical_therapy=5, medical_foundation=2),
    average_salary=95000,
    description="Perfect fit for rehabilitation and movement therapy!",
    skill_gaps=(
        "Advanced Manual Therapy",
        "Research Methods",
        "Specialty Certification",
        "Technology Integration",
    ),
    recommendations=(
        "Excellent foundation in movement science and rehabilitation",
        "DPT (Doctor of Physical Therapy) degree required",
        "Specialization options: Sports, Orthopedic, Neurological, Pediatric PT",
        "Average salary: $95,000 - $115,000",
    ),
)

LAB_SCIENTIST = CareerRule(
    key="lab_scientist",
    title="Medical Laboratory Scientist",
    group="medical",
    guard=AtLeast("laboratory", 3) | (AtLeast("laboratory", 2) & AtLeast("medical_foundation", 2)),
    score=score(80, 95, laboratory=5, medical_foundation=3),
    average_salary=75000,
    description="Excellent fit for laboratory diagnostics and medical testing!",
    skill_gaps=(
        "Molecular Diagnostics",
        "Quality Management",
        "Laboratory Information Systems",
        "Research",
    ),
    recommendations=(
        "Strong analytical and laboratory science foundation",
        "Bachelor's in Medical Laboratory Science + certification required",
        "Specialization options: Hematology, Microbiology, Chemistry, Molecular Diagnostics",
        "Average salary: $75,000 - $95,000",
    ),
)

RADIOLOGIC_TECHNOLOGIST = CareerRule(
    key="radiologic_technologist",
    title="Radiologic Technologist",
    group="medical",
    guard=AtLeast("imaging", 3) | (AtLeast("imaging", 2) & AtLeast("medical_foundation", 1)),
    score=score(85, 95, imaging=5, medical_foundation=2),
    average_salary=70000,
    description="Great match for medical imaging and diagnostic technology!",
    skill_gaps=(
        "Advanced Imaging Modalities",
        "Radiation Safety",
        "Image Analysis",
        "Technology Updates",
    ),
    recommendations=(
        "Strong foundation in medical imaging and technology",
        "Associate degree in Radiologic Technology + certification required",
        "Specialization options: CT, MRI, Nuclear Medicine, Mammography",
        "Average salary: $70,000 - $85,000",
    ),
)

PUBLIC_HEALTH_PROFESSIONAL = CareerRule(
    key="public_health_professional",
    title="Public Health Professional",
    group="medical",
    guard=AtLeast("public_health", 3) | (AtLeast("public_health", 2) & AtLeast("medical_foundation", 2)),
    score=score(80, 95, public_health=4, medical_foundation=2),
    average_salary=80000,
    description="Great match for population health and disease prevention!",
    skill_gaps=(
        "Health Policy",
        "Program Evaluation",
        "Global Health",
        "Health Communication",
    ),
    recommendations=(
        "Strong foundation in public health sciences and epidemiology",
        "MPH (Master of Public Health) degree highly recommended",
        "Career options: Government, NGOs, Healthcare Organizations, Research",
        "Average salary: $80,000 - $120,000",
    ),
)

# ---------------------------------------------------------------------------
# Technology
# ---------------------------------------------------------------------------

DATA_SCIENTIST = CareerRule(
    key="data_scientist",
    title="Data Scientist / AI Engineer",
    group="technology",
    guard=AtLeast("data_science", 4) | (AtLeast("data_science", 3) & AtLeast("software_engineering", 2)),
    score=score(80, 98, data_science=3, software_engineering=2),
    average_salary=130000,
    description="Outstanding fit for data science and artificial intelligence!",
    skill_gaps=("MLOps", "Deep Learning", "Big Data Engineering", "Model Deployment"),
    recommendations=(
        "Exceptional data science and machine learning expertise",
        "Consider specialization in Computer Vision, NLP, or Robotics",
        "Advanced degree in Data Science/CS often preferred",
        "Average salary: $130,000 - $200,000+",
    ),
)

FULL_STACK = CareerRule(
    key="full_stack_developer",
    title="Full Stack Developer",
    group="technology",
    guard=AnyOf(
        AtLeast("frontend", 3) & AtLeast("backend", 3),
        AtLeast("frontend", 4) & AtLeast("backend", 2),
        AtLeast("frontend", 2) & AtLeast("backend", 4),
    ),
    score=score(85, 98, frontend=2, backend=2, database=2),
    average_salary=105000,
    description="Perfect match for full stack development across the entire web stack!",
    skill_gaps=(
        "System Architecture",
        "DevOps Integration",
        "Performance Optimization",
        "Security Best Practices",
    ),
    recommendations=(
        "Excellent full stack capabilities with both frontend and backend expertise",
        "Consider specializing in modern frameworks like React/Node.js or Vue/Django",
        "Cloud deployment and DevOps skills would enhance your profile",
        "Average salary: $105,000 - $150,000",
    ),
)

FRONTEND_DEVELOPER = CareerRule(
    key="frontend_developer",
    title="Frontend Developer",
    group="technology",
    guard=AtLeast("frontend", 4) | (AtLeast("frontend", 3) & AtLeast("uiux", 2)),
    score=score(85, 95, frontend=3, uiux=2),
    average_salary=90000,
    description="Excellent match for frontend development and user interface creation!",
    skill_gaps=(
        "Advanced JavaScript",
        "Performance Optimization",
        "Testing Frameworks",
        "Build Tools",
    ),
    recommendations=(
        "Strong frontend development skills with modern frameworks",
        "TypeScript and advanced React/Vue patterns would be valuable",
        "Consider learning mobile development or design systems",
        "Average salary: $90,000 - $125,000",
    ),
)

BACKEND_DEVELOPER = CareerRule(
    key="backend_developer",
    title="Backend Developer",
    group="technology",
    guard=AtLeast("backend", 4) | (AtLeast("backend", 3) & AtLeast("database", 2)),
    score=score(85, 95, backend=3, database=2),
    average_salary=100000,
    description="Outstanding fit for backend development and server-side architecture!",
    skill_gaps=(
        "Microservices Architecture",
        "API Security",
        "Caching Strategies",
        "Message Queues",
    ),
    recommendations=(
        "Excellent backend development foundation with database expertise",
        "Microservices and cloud architecture skills are highly valuable",
        "Consider specializing in distributed systems or API design",
        "Average salary: $100,000 - $140,000",
    ),
)

DEVOPS_ENGINEER = CareerRule(
    key="devops_engineer",
    title="DevOps Engineer",
    group="technology",
    guard=AtLeast("devops", 4) | AllOf(
        AtLeast("devops", 3), AtLeast("backend", 2) | AtLeast("database", 2)
    ),
    score=score(85, 98, devops=4, backend=2),
    average_salary=120000,
    description="Perfect match for DevOps and cloud infrastructure engineering!",
    skill_gaps=(
        "Site Reliability Engineering",
        "Observability",
        "Security Automation",
        "Cost Optimization",
    ),
    recommendations=(
        "Outstanding DevOps and cloud engineering capabilities",
        "Consider AWS/Azure/GCP certifications for specialization",
        "Site Reliability Engineering (SRE) would be a natural progression",
        "Average salary: $120,000 - $170,000",
    ),
)

MOBILE_DEVELOPER = CareerRule(
    key="mobile_developer",
    title="Mobile Developer",
    group="technology",
    guard=AtLeast("mobile", 4) | AllOf(
        AtLeast("mobile", 3), AtLeast("frontend", 2) | AtLeast("software_engineering", 2)
    ),
    score=score(85, 95, mobile=4, frontend=2),
    average_salary=95000,
    description="Excellent fit for mobile application development!",
    skill_gaps=(
        "Advanced Mobile Architecture",
        "Performance Optimization",
        "App Store Optimization",
        "Cross-Platform Expertise",
    ),
    recommendations=(
        "Strong mobile development skills across platforms",
        "Consider specializing in React Native, Flutter, or native development",
        "AR/VR mobile development is an emerging high-value area",
        "Average salary: $95,000 - $130,000",
    ),
)

CYBERSECURITY_SPECIALIST = CareerRule(
    key="cybersecurity_specialist",
    title="Cybersecurity Specialist",
    group="technology",
    guard=AtLeast("cybersecurity", 4) | AllOf(
        AtLeast("cybersecurity", 3), AtLeast("backend", 2) | AtLeast("software_engineering", 2)
    ),
    score=score(85, 98, cybersecurity=4, software_engineering=2),
    average_salary=115000,
    description="Outstanding fit for cybersecurity and information security roles!",
    skill_gaps=(
        "Advanced Threat Detection",
        "Incident Response",
        "Security Architecture",
        "Compliance Frameworks",
    ),
    recommendations=(
        "Excellent cybersecurity foundation with technical depth",
        "Consider certifications: CISSP, CEH, OSCP, or SANS specializations",
        "Cloud security and DevSecOps are high-growth areas",
        "Average salary: $115,000 - $160,000",
    ),
)

GAME_DEVELOPER = CareerRule(
    key="game_developer",
    title="Game Developer",
    group="technology",
    guard=AtLeast("game_dev", 4) | (AtLeast("game_dev", 3) & AtLeast("software_engineering", 2)),
    score=score(85, 95, game_dev=4, software_engineering=2),
    average_salary=85000,
    description="Great match for game development and interactive entertainment!",
    skill_gaps=(
        "Advanced Game Engines",
        "Multiplayer Programming",
        "VR/AR Development",
        "Game Optimization",
    ),
    recommendations=(
        "Strong game development skills with programming foundation",
        "Consider specializing in Unity, Unreal Engine, or indie game development",
        "VR/AR and mobile gaming are rapidly growing segments",
        "Average salary: $85,000 - $120,000",
    ),
)

UIUX_DESIGNER = CareerRule(
    key="uiux_designer",
    title="UI/UX Designer",
    group="technology",
    guard=AtLeast("uiux", 4) | (AtLeast("uiux", 3) & AtLeast("frontend", 2)),
    score=score(85, 95, uiux=4, frontend=2),
    average_salary=80000,
    description="Excellent fit for user interface and user experience design!",
    skill_gaps=(
        "Design Systems",
        "User Research",
        "Prototyping Tools",
        "Accessibility Design",
    ),
    recommendations=(
        "Strong design foundation with user experience focus",
        "Consider specializing in product design or design systems",
        "Frontend development skills give you a significant advantage",
        "Average salary: $80,000 - $120,000",
    ),
)

SOFTWARE_ENGINEER = CareerRule(
    key="software_engineer",
    title="Software Engineer",
    group="technology",
    guard=AtLeast("software_engineering", 4) | AllOf(
        AtLeast("software_engineering", 3), AtLeast("frontend", 2) | AtLeast("backend", 2)
    ),
    score=score(80, 92, software_engineering=3, frontend=2, backend=2),
    average_salary=95000,
    description="Strong foundation for software engineering and development roles!",
    skill_gaps=(
        "System Design",
        "Advanced Algorithms",
        "Software Architecture",
        "Technical Leadership",
    ),
    recommendations=(
        "Solid software engineering fundamentals",
        "Consider specializing in a specific domain: web, mobile, or systems",
        "System design and architecture skills are valuable for senior roles",
        "Average salary: $95,000 - $140,000",
    ),
)

# ---------------------------------------------------------------------------
# Interdisciplinary
# ---------------------------------------------------------------------------

HEALTH_INFORMATICS = CareerRule(
    key="health_informatics_specialist",
    title="Medical Technology / Health Informatics Specialist",
    group="interdisciplinary",
    guard=AnyOf(
        AllOf(
            AtLeast("medical_foundation", 3),
            AtLeast("data_science", 2) | AtLeast("software_engineering", 2),
        ),
        AtLeast("medical_foundation", 2) & AtLeast("data_science", 3),
    ),
    score=score(80, 96, medical_foundation=3, data_science=3, software_engineering=2),
    average_salary=110000,
    description="Perfect blend of medical knowledge and technology expertise!",
    skill_gaps=(
        "Health Data Standards",
        "Medical Device Integration",
        "Healthcare Analytics",
        "Regulatory Compliance",
    ),
    recommendations=(
        "Exceptional combination of medical and technology skills",
        "High demand in telemedicine, medical devices, and health analytics",
        "Consider specializing in medical AI, EHR systems, or digital health",
        "Average salary: $110,000 - $150,000",
    ),
)

BIOMEDICAL_ENGINEER = CareerRule(
    key="biomedical_engineer",
    title="Biomedical Engineer",
    group="interdisciplinary",
    guard=AnyOf(
        AtLeast("medical_foundation", 2) & AtLeast("software_engineering", 3),
        AllOf(
            AtLeast("medical_foundation", 3),
            AtLeast("frontend", 2) | AtLeast("backend", 2),
        ),
    ),
    score=score(80, 95, medical_foundation=3, software_engineering=3),
    average_salary=100000,
    description="Excellent fit for biomedical engineering and medical technology!",
    skill_gaps=(
        "Medical Device Design",
        "Regulatory Affairs",
        "Biomedical Signal Processing",
        "Clinical Trials",
    ),
    recommendations=(
        "Strong foundation in both medical sciences and engineering",
        "Medical device development and digital health are growing rapidly",
        "Consider specializing in medical imaging, prosthetics, or diagnostic equipment",
        "Average salary: $100,000 - $135,000",
    ),
)

# ---------------------------------------------------------------------------
# General catch-alls
# ---------------------------------------------------------------------------

HEALTHCARE_PROFESSIONAL = CareerRule(
    key="healthcare_professional",
    title="Healthcare Professional",
    group="general",
    guard=AnyOf(
        AtLeast("medical_foundation", 3),
        AtLeast("nursing", 2),
        AllOf(
            AtLeast("medical_foundation", 2),
            AtLeast("laboratory", 1) | AtLeast("imaging", 1),
        ),
        AtLeast("mental_health", 2),
        AtLeast("public_health", 2),
    ),
    score=score(70, 85, medical_foundation=4, nursing=3, mental_health=3),
    average_salary=75000,
    description="Strong foundation for various healthcare career paths!",
    skill_gaps=(
        "Clinical Experience",
        "Specialty Knowledge",
        "Professional Certification",
        "Patient Care Skills",
    ),
    recommendations=(
        "Solid medical knowledge foundation",
        "Consider focusing on a specific healthcare specialty",
        "Clinical experience and certification will enhance opportunities",
        "Average salary: $75,000 - $120,000 depending on specialty",
    ),
)

TECHNOLOGY_PROFESSIONAL = CareerRule(
    key="technology_professional",
    title="Technology Professional",
    group="general",
    guard=AnyOf(
        AtLeast("frontend", 2),
        AtLeast("backend", 2),
        AtLeast("data_science", 2),
        AtLeast("software_engineering", 3),
        AtLeast("devops", 2),
        AtLeast("uiux", 2),
        AtLeast("game_dev", 2),
    ),
    score=score(65, 80, frontend=3, backend=3, data_science=3, software_engineering=2),
    average_salary=85000,
    description="Good foundation for technology and software development roles!",
    skill_gaps=(
        "Specialized Framework",
        "Advanced Programming",
        "System Design",
        "Industry Experience",
    ),
    recommendations=(
        "Solid technology foundation with room for specialization",
        "Consider focusing on a specific tech stack or domain",
        "Building projects and gaining experience will accelerate growth",
        "Average salary: $85,000 - $120,000 depending on specialization",
    ),
)

CAREER_RULES: tuple[CareerRule, ...] = (
    SURGEON,
    PHYSICIAN,
    PSYCHIATRIST,
    REGISTERED_NURSE,
    PHARMACIST,
    DENTIST,
    PHYSICAL_THERAPIST,
    LAB_SCIENTIST,
    RADIOLOGIC_TECHNOLOGIST,
    PUBLIC_HEALTH_PROFESSIONAL,
    DATA_SCIENTIST,
    FULL_STACK,
    FRONTEND_DEVELOPER,
    BACKEND_DEVELOPER,
    DEVOPS_ENGINEER,
    MOBILE_DEVELOPER,
    CYBERSECURITY_SPECIALIST,
    GAME_DEVELOPER,
    UIUX_DESIGNER,
    SOFTWARE_ENGINEER,
    HEALTH_INFORMATICS,
    BIOMEDICAL_ENGINEER,
    HEALTHCARE_PROFESSIONAL,
    TECHNOLOGY_PROFESSIONAL,
)

# Returned when no guard in the cascade holds.
EXPLORER_RULE = CareerRule(
    key="career_explorer",
    title="Career Explorer",
    group="default",
    guard=Never(),
    score=score(60, 60),
    average_salary=65000,
    description="Great foundation for exploring diverse career opportunities!",
    skill_gaps=(
        "Specialized Skills",
        "Industry Knowledge",
        "Professional Experience",
        "Certification/Education",
    ),
    recommendations=(
        "Consider exploring both medical and technology fields based on your interests",
        "Medical fields: Medicine, Nursing, Pharmacy, Physical Therapy offer excellent growth",
        "Technology fields: Software Development, Data Science, Cybersecurity are in high demand",
        "Focus on building depth in a chosen field through education and experience",
        "Average salary varies significantly: $50,000 - $300,000+ depending on specialization",
    ),
)
