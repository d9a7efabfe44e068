"""Pivot Catalog.

Static, read-only catalog of alternative business concepts, grouped by
business-model archetype. Every entry carries market-sizing strings and
six 0-100 scoring factors consumed by the pivot engine.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

from ..schemas.pivot_schema import BusinessModelType, CategoryPivotOption, ScoringFactors

PHYSICAL_PRODUCT_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="physical.corporate-gifts",
        category=BusinessModelType.PHYSICAL_PRODUCT,
        label="Custom Corporate Gifts",
        description="Premium corporate gifting with personalization and bulk fulfillment",
        tam="$22B (corporate gifts market)",
        growth="8% CAGR, driven by remote work culture",
        competition="Moderate - fragmented suppliers",
        major_competitors=["4imprint", "Promotional Products Inc", "Swag.com"],
        cac_range="$300-$800",
        ltv="$8,000-$25,000",
        barriers=["Minimum order quantities", "Seasonal demand", "Corporate procurement cycles"],
        opportunities=["Sustainable materials", "Remote work gifts", "Employee recognition"],
        scoring_factors=ScoringFactors(problem=60, underserved=55, demand=70, differentiation=65, economics=75, gtm=60),
        relevant_skills=["craftsmanship", "design", "manufacturing", "B2B sales"],
    ),
    CategoryPivotOption(
        id="physical.sustainable-accessories",
        category=BusinessModelType.PHYSICAL_PRODUCT,
        label="Sustainable Fashion Accessories",
        description="Eco-certified materials with transparency and carbon-neutral shipping",
        tam="$15B (sustainable fashion subset)",
        growth="12% CAGR, consumer consciousness driving demand",
        competition="High but values-driven purchasing",
        major_competitors=["Everlane", "Patagonia Accessories", "Stella McCartney"],
        cac_range="$150-$400",
        ltv="$3,000-$8,000",
        barriers=["Certification costs", "Supply chain transparency", "Premium pricing"],
        opportunities=["Gen Z consumers", "Corporate sustainability", "Circular economy"],
        scoring_factors=ScoringFactors(problem=55, underserved=60, demand=65, differentiation=70, economics=60, gtm=65),
        relevant_skills=["sustainable sourcing", "design", "brand storytelling"],
    ),
)

MARKETPLACE_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="marketplace.regulated-professional-services",
        category=BusinessModelType.MARKETPLACE,
        label="Regulated Professional Services",
        description="Legal, accounting, consulting with compliance and secure workflows",
        tam="$15B (professional services software)",
        growth="9% CAGR, compliance requirements increasing",
        competition="Moderate - regulatory moats",
        major_competitors=["Clio", "Thomson Reuters", "Intuit ProConnect"],
        cac_range="$800-$2,400",
        ltv="$25,000-$60,000",
        barriers=["Regulatory compliance", "Professional licensing", "Security requirements"],
        opportunities=["Compliance automation", "Client portals", "Document security"],
        scoring_factors=ScoringFactors(problem=75, underserved=70, demand=65, differentiation=80, economics=85, gtm=60),
        relevant_skills=["compliance knowledge", "professional services", "security"],
    ),
)

SAAS_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="saas.healthcare-practice-mgmt",
        category=BusinessModelType.SAAS_B2B,
        label="Healthcare Practice Management",
        description="HIPAA-compliant workflow tools for medical practices",
        tam="$8B (healthcare IT subset)",
        growth="12% CAGR, digital health acceleration",
        competition="Moderate - specialty fragmentation",
        major_competitors=["Epic", "athenahealth", "DrChrono"],
        cac_range="$1,200-$3,600",
        ltv="$35,000-$85,000",
        barriers=["HIPAA compliance", "Integration complexity", "Long sales cycles"],
        opportunities=["Specialty workflows", "Telehealth integration", "Patient engagement"],
        scoring_factors=ScoringFactors(problem=80, underserved=70, demand=75, differentiation=65, economics=85, gtm=55),
        relevant_skills=["healthcare knowledge", "compliance", "workflow design"],
    ),
)

ENTERPRISE_SAAS_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="healthcare-ai-clinical",
        category=BusinessModelType.ENTERPRISE_SAAS,
        label="Healthcare AI - Clinical Decision Support",
        description="AI-powered clinical documentation, diagnosis assistance, and care pathway optimization for hospital systems",
        tam="$12B (healthcare AI & clinical decision support)",
        growth="32% CAGR",
        competition="Medium (Epic, Cerner integrations required)",
        major_competitors=["Notable Health", "Nuance DAX", "Abridge"],
        cac_range="$20k-$150k",
        ltv="$250k-$2M",
        barriers=[
            "HIPAA compliance and clinical validation required",
            "Long sales cycles (9-18 months)",
            "EHR integration complexity",
        ],
        opportunities=[
            "Regulatory moats through FDA clearances",
            "Sticky integrations with EHR systems",
            "High willingness to pay for clinical accuracy",
        ],
        scoring_factors=ScoringFactors(problem=78, underserved=62, demand=75, differentiation=55, economics=60, gtm=55),
        relevant_skills=["healthcare", "compliance", "enterprise sales"],
    ),
    CategoryPivotOption(
        id="legal-ai-contract",
        category=BusinessModelType.ENTERPRISE_SAAS,
        label="Legal AI - Contract Intelligence & eDiscovery",
        description="AI contract review, clause extraction, risk analysis, and litigation support for law firms and corporate legal departments",
        tam="$9B (legal tech AI subset)",
        growth="28% CAGR",
        competition="Medium-High",
        major_competitors=["Kira Systems", "Luminance", "eBrevia"],
        cac_range="$15k-$80k",
        ltv="$150k-$1M",
        barriers=[
            "Legal accuracy and liability concerns",
            "Bar association regulatory considerations",
            "Trust-building in conservative industry",
        ],
        opportunities=[
            "High-value workflows ($200-500/hr lawyer time)",
            "Recurring revenue from ongoing matters",
            "Network effects from clause libraries",
        ],
        scoring_factors=ScoringFactors(problem=72, underserved=58, demand=70, differentiation=60, economics=65, gtm=50),
        relevant_skills=["legal domain", "nlp", "enterprise sales"],
    ),
    CategoryPivotOption(
        id="finserv-compliance-fraud",
        category=BusinessModelType.ENTERPRISE_SAAS,
        label="Financial Services - Compliance & Fraud Detection",
        description="AI-powered AML, KYC, transaction monitoring, and fraud detection for banks, fintech, and payment processors",
        tam="$15B (RegTech & fraud prevention)",
        growth="25% CAGR",
        competition="High",
        major_competitors=["ComplyAdvantage", "Feedzai", "Sift"],
        cac_range="$25k-$120k",
        ltv="$300k-$2M",
        barriers=[
            "Regulatory approval and audits required",
            "High accuracy requirements (false positives costly)",
            "Data security and privacy concerns",
        ],
        opportunities=[
            "Regulatory mandates create demand",
            "Mission-critical systems are sticky",
            "Expansion from compliance to broader FinCrime",
        ],
        scoring_factors=ScoringFactors(problem=80, underserved=60, demand=75, differentiation=55, economics=58, gtm=45),
        relevant_skills=["compliance", "ml ops", "security"],
    ),
    CategoryPivotOption(
        id="manufacturing-predictive",
        category=BusinessModelType.ENTERPRISE_SAAS,
        label="Manufacturing - Predictive Maintenance & QC",
        description="AI-powered predictive maintenance, quality control, and process optimization for industrial manufacturers",
        tam="$8B (industrial AI subset)",
        growth="30% CAGR",
        competition="Medium",
        major_competitors=["Uptake", "C3 AI", "SparkCognition"],
        cac_range="$10k-$90k",
        ltv="$200k-$1.5M",
        barriers=[
            "OT/IoT integration complexity",
            "Long proof-of-concept cycles",
            "Industry-specific domain expertise required",
        ],
        opportunities=[
            "Clear ROI from downtime reduction",
            "Expansion across multiple plants",
            "Data moats from proprietary sensor data",
        ],
        scoring_factors=ScoringFactors(problem=70, underserved=58, demand=67, differentiation=55, economics=60, gtm=55),
        relevant_skills=["industrial", "iot", "ml"],
    ),
)

EDTECH_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="edtech.corporate-training-platform",
        category=BusinessModelType.EDTECH,
        label="Corporate Training Platform (B2B L&D)",
        description="Skills taxonomy, course authoring, assessments, and analytics for company upskilling (integrates with HRIS/LMS).",
        tam="$22B (corporate learning tech)",
        growth="10% CAGR — AI + compliance driving demand",
        competition="High — incumbents strong; niches open by role/industry",
        major_competitors=["Docebo", "Cornerstone", "Workday Learning", "Udemy Business"],
        cac_range="$1,200–$5,000 (B2B midmarket)",
        ltv="$30,000–$120,000",
        barriers=["Proof of skill impact", "Integrations (SSO/HRIS/LMS)", "Change management"],
        opportunities=["Role-based pathways", "Manager dashboards", "Built-in content marketplace"],
        scoring_factors=ScoringFactors(problem=78, underserved=62, demand=68, differentiation=60, economics=82, gtm=58),
        relevant_skills=["B2B sales", "LMS/LTI/SCORM", "analytics"],
    ),
    CategoryPivotOption(
        id="edtech.professional-certification-prep",
        category=BusinessModelType.EDTECH,
        label="Professional Certification Prep",
        description="High-stakes exam prep (cloud, cybersecurity, finance) with adaptive practice and cohort support.",
        tam="$9B (professional exam prep)",
        growth="8% CAGR — credentials inflation",
        competition="Moderate — fragmented by domain",
        major_competitors=["A Cloud Guru", "Whizlabs", "Kaplan", "Udacity (adjacent)"],
        cac_range="$60–$250",
        ltv="$300–$1,200",
        barriers=["Content freshness", "Exam alignment", "Instructor quality"],
        opportunities=["Official partnerships", "Job placement tie-ins", "Adaptive learning"],
        scoring_factors=ScoringFactors(problem=72, underserved=65, demand=74, differentiation=62, economics=66, gtm=64),
        relevant_skills=["instructional design", "domain expertise", "community"],
    ),
    CategoryPivotOption(
        id="edtech.tutoring-platform",
        category=BusinessModelType.EDTECH,
        label="Tutoring Platform (K‑12/College)",
        description="On-demand and scheduled tutoring with quality controls, curriculum alignment, and school district pilots.",
        tam="$8B (online tutoring)",
        growth="12% CAGR — post-remote learning gaps",
        competition="High — marketplaces and agencies",
        major_competitors=["Varsity Tutors", "Wyzant", "Tutor.com"],
        cac_range="$40–$150 (parent/student)",
        ltv="$400–$1,800",
        barriers=["Tutor quality/reliability", "District procurement", "Safety/compliance"],
        opportunities=["School contracts", "Data-driven matching", "Foundational skills focus"],
        scoring_factors=ScoringFactors(problem=68, underserved=62, demand=70, differentiation=58, economics=60, gtm=62),
        relevant_skills=["marketplace ops", "trust & safety", "school sales"],
    ),
    CategoryPivotOption(
        id="edtech.cohort-based-exec-education",
        category=BusinessModelType.EDTECH,
        label="Cohort-Based Executive Education",
        description="Short, outcomes-focused cohorts for managers and ICs; capstone projects, mentors, and alumni network.",
        tam="$6B (exec/manager education online)",
        growth="9% CAGR",
        competition="Moderate — brand matters, niches open",
        major_competitors=["Section", "Reforge", "AltMBA"],
        cac_range="$200–$800",
        ltv="$1,200–$6,000",
        barriers=["Instructor supply", "Outcomes proof", "Community moderation"],
        opportunities=["Company sponsorships", "Career ladders", "Mentor marketplace"],
        scoring_factors=ScoringFactors(problem=66, underserved=60, demand=64, differentiation=65, economics=72, gtm=60),
        relevant_skills=["program design", "community", "partnerships"],
    ),
    CategoryPivotOption(
        id="edtech.vocational-upskilling-microlearning",
        category=BusinessModelType.EDTECH,
        label="Vocational Upskilling (Microlearning)",
        description="Short modules for frontline roles (retail, hospitality, logistics) with mobile-first delivery and certifications.",
        tam="$5B (vocational digital training)",
        growth="11% CAGR",
        competition="Low–Moderate — underserved verticals",
        major_competitors=["Axonify", "EduMe", "EdApp"],
        cac_range="$800–$3,000 (B2B)",
        ltv="$20,000–$80,000",
        barriers=["Manager adoption", "Content localization", "Device constraints"],
        opportunities=["OSHA/compliance bundles", "Talent pipelines", "Incentives/points"],
        scoring_factors=ScoringFactors(problem=74, underserved=70, demand=66, differentiation=64, economics=78, gtm=56),
        relevant_skills=["mobile UX", "operations", "B2B2C"],
    ),
)

MOBILE_APP_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="mobile.habit-tracker",
        category=BusinessModelType.MOBILE_APP,
        label="Habit Tracker (Wellness)",
        description="Lightweight habit & mood tracker with streaks, social accountability, and coach marketplaces",
        tam="$6B (wellness apps; large addressable audience)",
        growth="9% CAGR",
        competition="High - differentiation via niche and UX",
        major_competitors=["Fabulous", "Habitica", "Streaks"],
        cac_range="$1-$5 (organic/UGC) · $2-$15 (paid)",
        ltv="$10-$60 (IAP/subscription)",
        barriers=["retention curve", "paid UA costs", "feature parity"],
        opportunities=["community challenges", "coach add-ons", "B2B perks"],
        scoring_factors=ScoringFactors(problem=55, underserved=58, demand=62, differentiation=55, economics=52, gtm=65),
        relevant_skills=["mobile UX", "growth loops", "content/community"],
    ),
    CategoryPivotOption(
        id="mobile.corporate-wellness-b2b2c",
        category=BusinessModelType.MOBILE_APP,
        label="Corporate Wellness Programs (B2B2C)",
        description="Sell fitness/wellness platform to HR departments as employee benefit. Companies pay $5-15 per employee/month",
        tam="$8B (corporate wellness market)",
        growth="7% CAGR",
        competition="Medium",
        major_competitors=["Wellable", "Virgin Pulse", "Gympass"],
        cac_range="$1,000-$5,000 (B2B)",
        ltv="$50,000-$200,000",
        barriers=["Long B2B sales cycles (3-9 months)", "HR integration requirements", "Engagement metrics critical for renewals"],
        opportunities=["Predictable B2B revenue vs consumer churn", "Built-in distribution through employers", "Sticky contracts (annual renewals)"],
        scoring_factors=ScoringFactors(problem=65, underserved=60, demand=66, differentiation=58, economics=70, gtm=60),
        relevant_skills=["B2B sales", "fitness", "employee benefits"],
    ),
    CategoryPivotOption(
        id="mobile.physical-therapy-rehab",
        category=BusinessModelType.MOBILE_APP,
        label="Physical Therapy & Rehabilitation Apps",
        description="Clinical-grade PT exercises, recovery tracking, and provider integration. Insurance reimbursement + patient co-pay",
        tam="$6B (digital therapeutics for MSK)",
        growth="25% CAGR",
        competition="Medium",
        major_competitors=["Hinge Health", "Sword Health", "Kaia Health"],
        cac_range="$50-$300 (provider/patient mix)",
        ltv="$500-$3,000",
        barriers=["Clinical validation studies required", "Insurance reimbursement complexity", "Provider adoption needed"],
        opportunities=["Insurance reimbursement reduces CAC", "Medical necessity creates urgency", "Regulatory moats (FDA clearance)"],
        scoring_factors=ScoringFactors(problem=70, underserved=60, demand=72, differentiation=60, economics=62, gtm=55),
        relevant_skills=["healthcare", "regulatory", "clinical partnerships"],
    ),
    CategoryPivotOption(
        id="mobile.senior-fitness-fall-prevention",
        category=BusinessModelType.MOBILE_APP,
        label="Senior Fitness & Fall Prevention",
        description="Age-appropriate exercise programs, balance training, and caregiver monitoring for 65+ demographic",
        tam="$6B (senior fitness & preventive health)",
        growth="15% CAGR",
        competition="Low-Medium",
        major_competitors=["Bold", "Nymbl", "SilverSneakers (offline)"],
        cac_range="$20-$120",
        ltv="$200-$1,200",
        barriers=["UI/UX complexity for older users", "Distribution to senior population", "Trust-building with caregivers"],
        opportunities=["Medicare Advantage partnerships", "Lower competition than general fitness", "Caregiver willingness to pay"],
        scoring_factors=ScoringFactors(problem=65, underserved=60, demand=65, differentiation=56, economics=58, gtm=55),
        relevant_skills=["senior UX", "health partnerships", "distribution"],
    ),
    CategoryPivotOption(
        id="mobile.youth-sports-training",
        category=BusinessModelType.MOBILE_APP,
        label="Youth Sports Training & Coaching",
        description="Sport-specific training programs, video analysis, and parent-coach communication for competitive youth athletes",
        tam="$4B (youth sports tech)",
        growth="12% CAGR",
        competition="Low-Medium",
        major_competitors=["CoachNow", "Hudl Technique", "HomeCourt"],
        cac_range="$10-$60",
        ltv="$150-$900",
        barriers=["Sport-specific expertise required", "Parent as payer, child as user", "Seasonal usage patterns"],
        opportunities=["Parents highly motivated for child success", "Premium pricing ($30-50/month)", "Team/club bulk licensing"],
        scoring_factors=ScoringFactors(problem=60, underserved=58, demand=63, differentiation=55, economics=55, gtm=55),
        relevant_skills=["sports domain", "video analysis", "youth markets"],
    ),
    CategoryPivotOption(
        id="mobile.prenatal-postpartum-fitness",
        category=BusinessModelType.MOBILE_APP,
        label="Prenatal & Postpartum Fitness",
        description="Pregnancy-safe workouts, pelvic floor exercises, and postpartum recovery tracking with medical guidance",
        tam="$3B (maternal health tech)",
        growth="20% CAGR",
        competition="Medium",
        major_competitors=["Expectful", "Pvolve", "Kegg"],
        cac_range="$15-$80",
        ltv="$120-$600",
        barriers=["Medical liability concerns", "Clinical content validation needed", "Short window of high engagement"],
        opportunities=["High willingness to pay during pregnancy", "Provider referral potential", "OB/GYN partnerships"],
        scoring_factors=ScoringFactors(problem=68, underserved=58, demand=62, differentiation=55, economics=50, gtm=55),
        relevant_skills=["women health", "content validation", "provider partnerships"],
    ),
    CategoryPivotOption(
        id="mobile.offline-field-data",
        category=BusinessModelType.MOBILE_APP,
        label="Offline Field Data Capture",
        description="Offline-first forms, photos, and GPS for inspections and field audits with sync and templates",
        tam="$3B (field service apps)",
        growth="8% CAGR",
        competition="Moderate - opportunity in specialization",
        major_competitors=["Fulcrum", "iAuditor", "ProntoForms"],
        cac_range="$10-$60 (B2B self-serve)",
        ltv="$150-$900 (SMB seats)",
        barriers=["device fragmentation", "sync conflicts", "enterprise pilots"],
        opportunities=["vertical templates", "workflow integrations", "audit trail"],
        scoring_factors=ScoringFactors(problem=70, underserved=62, demand=64, differentiation=60, economics=62, gtm=58),
        relevant_skills=["offline sync", "B2B sales", "workflow design"],
    ),
    CategoryPivotOption(
        id="mobile.creator-video-tools",
        category=BusinessModelType.MOBILE_APP,
        label="Creator Video Tools (Lite)",
        description="Mobile-first editing with captioning, templates, and viral hooks aimed at short-form creators",
        tam="$5B (creator economy tooling)",
        growth="12% CAGR",
        competition="High - but niche workflows can win",
        major_competitors=["CapCut", "InShot", "VN"],
        cac_range="$0-$5 (organic TikTok/UGC)",
        ltv="$15-$80 (IAP/subscription)",
        barriers=["performance on low-end devices", "format churn"],
        opportunities=["template marketplaces", "collabs", "brand kits"],
        scoring_factors=ScoringFactors(problem=58, underserved=60, demand=70, differentiation=58, economics=55, gtm=68),
        relevant_skills=["video processing", "UGC growth", "design systems"],
    ),
)

FINTECH_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="fintech.employee-financial-wellness",
        category=BusinessModelType.FINTECH,
        label="B2B Employee Financial Wellness",
        description="Corporate benefits platform for employee financial health and education",
        tam="$8B (workplace financial wellness)",
        growth="18% CAGR, employer benefits expansion",
        competition="Moderate - enterprise sales required",
        major_competitors=["Brightside", "LearnLux", "Best Money Moves", "SmartDollar"],
        cac_range="$3,000-$10,000",
        ltv="$60,000-$180,000",
        barriers=["Enterprise sales cycles", "Benefits integration", "Regulatory compliance"],
        opportunities=["HR tech partnerships", "Student loan benefits", "Financial stress reduction"],
        scoring_factors=ScoringFactors(problem=75, underserved=70, demand=80, differentiation=65, economics=85, gtm=60),
        relevant_skills=["B2B sales", "HR tech", "financial planning", "benefits administration"],
    ),
    CategoryPivotOption(
        id="fintech.smb-credit-building",
        category=BusinessModelType.FINTECH,
        label="SMB Business Credit Building",
        description="Business credit monitoring and building tools for small businesses",
        tam="$12B (small business financial tools)",
        growth="14% CAGR, SMB digitization trend",
        competition="Moderate - established players but room for innovation",
        major_competitors=["Nav", "CreditStrong Business", "Dun & Bradstreet"],
        cac_range="$400-$1,200",
        ltv="$8,000-$25,000",
        barriers=["Business data access", "Commercial credit bureaus", "Fraud prevention"],
        opportunities=["Lending marketplace integration", "Invoice factoring", "Business formation"],
        scoring_factors=ScoringFactors(problem=70, underserved=65, demand=75, differentiation=70, economics=75, gtm=65),
        relevant_skills=["business finance", "B2B sales", "credit reporting", "small business"],
    ),
    CategoryPivotOption(
        id="fintech.gig-worker-tools",
        category=BusinessModelType.FINTECH,
        label="Gig Worker Financial Tools",
        description="Income smoothing, tax planning, and benefits for freelancers and contractors",
        tam="$6B (gig economy financial services)",
        growth="22% CAGR, gig economy expansion",
        competition="Moderate - growing market with opportunities",
        major_competitors=["Keeper Tax", "Catch", "Hurdlr", "QuickBooks Self-Employed"],
        cac_range="$200-$600",
        ltv="$3,000-$9,000",
        barriers=["Income verification", "Tax complexity", "Seasonal usage patterns"],
        opportunities=["Platform partnerships (Uber, DoorDash)", "Income-based lending", "Insurance products"],
        scoring_factors=ScoringFactors(problem=75, underserved=70, demand=80, differentiation=65, economics=70, gtm=70),
        relevant_skills=["tax knowledge", "gig economy", "platform integrations", "consumer finance"],
    ),
    CategoryPivotOption(
        id="fintech.student-financial-literacy",
        category=BusinessModelType.FINTECH,
        label="Student Financial Literacy Platform",
        description="Campus-focused financial education with budgeting and credit building tools",
        tam="$4B (student financial services)",
        growth="16% CAGR, student debt crisis awareness",
        competition="Low - underserved demographic",
        major_competitors=["Mos", "Greenlight (younger demo)", "Credit Karma (broader)"],
        cac_range="$100-$300",
        ltv="$2,000-$6,000",
        barriers=["Limited student income", "Campus partnerships", "Parent involvement"],
        opportunities=["University partnerships", "Student loan refinancing", "First credit card"],
        scoring_factors=ScoringFactors(problem=70, underserved=75, demand=70, differentiation=70, economics=60, gtm=65),
        relevant_skills=["education market", "financial literacy", "campus partnerships", "youth engagement"],
    ),
    CategoryPivotOption(
        id="fintech.debt-optimization",
        category=BusinessModelType.FINTECH,
        label="AI-Powered Debt Optimization",
        description="Automated debt payoff strategies with refinancing recommendations",
        tam="$5B (debt management software)",
        growth="12% CAGR, consumer debt levels high",
        competition="Moderate - established debt management companies",
        major_competitors=["Tally", "Payoff", "SoFi", "Marcus by Goldman Sachs"],
        cac_range="$150-$400",
        ltv="$2,500-$8,000",
        barriers=["Credit access requirements", "Debt consolidation regulations", "Trust building"],
        opportunities=["Refinancing partnerships", "Credit counseling integration", "Financial coaching"],
        scoring_factors=ScoringFactors(problem=80, underserved=60, demand=75, differentiation=65, economics=70, gtm=60),
        relevant_skills=["debt management", "credit analysis", "financial planning", "lending partnerships"],
    ),
    CategoryPivotOption(
        id="fintech.immigrant-financial-services",
        category=BusinessModelType.FINTECH,
        label="Immigrant Financial Services",
        description="Credit building and banking for immigrants with limited US credit history",
        tam="$7B (immigrant financial services)",
        growth="15% CAGR, underserved demographic",
        competition="Low - highly underserved market",
        major_competitors=["Nova Credit", "Petal", "Mission Lane", "Self"],
        cac_range="$300-$800",
        ltv="$5,000-$15,000",
        barriers=["Alternative credit data", "Regulatory compliance", "Language barriers"],
        opportunities=["Remittance integration", "International credit history", "Community partnerships"],
        scoring_factors=ScoringFactors(problem=85, underserved=80, demand=75, differentiation=80, economics=70, gtm=65),
        relevant_skills=["alternative credit scoring", "multilingual support", "compliance"],
    ),
    CategoryPivotOption(
        id="fintech.savings-automation",
        category=BusinessModelType.FINTECH,
        label="Gamified Savings & Investment",
        description="Behavioral finance app with automated savings rules and micro-investing",
        tam="$9B (consumer savings apps)",
        growth="20% CAGR, financial wellness trend",
        competition="High but differentiation through features",
        major_competitors=["Acorns", "Chime", "Digit", "Qapital"],
        cac_range="$80-$250",
        ltv="$1,500-$4,000",
        barriers=["Banking partnerships", "Investment regulations", "Low margins"],
        opportunities=["Behavioral psychology features", "Social savings challenges", "Crypto integration"],
        scoring_factors=ScoringFactors(problem=60, underserved=55, demand=75, differentiation=65, economics=60, gtm=70),
        relevant_skills=["behavioral finance", "gamification", "investment products", "banking APIs"],
    ),
)

HEALTHCARE_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="health.corporate-mental-health-benefits",
        label="Corporate Mental Health Benefits (EAP)",
        description="B2B employee assistance programs with therapy, coaching, and wellness",
        category=BusinessModelType.HEALTHCARE,
        tam="$14B (corporate mental health benefits)",
        growth="22% CAGR, workplace mental health priority",
        competition="Moderate - enterprise sales complexity",
        major_competitors=["Lyra Health", "Spring Health", "Modern Health", "Ginger"],
        cac_range="$5,000-$15,000",
        ltv="$100,000-$300,000",
        barriers=["Enterprise sales cycles", "HIPAA compliance", "Benefits integration", "Utilization tracking"],
        opportunities=["Hybrid work mental health", "Manager training", "Crisis intervention", "Preventive care"],
        scoring_factors=ScoringFactors(problem=80, underserved=70, demand=85, differentiation=70, economics=85, gtm=60),
        relevant_skills=["B2B healthcare sales", "HR partnerships", "clinical operations", "benefits administration"],
    ),
    CategoryPivotOption(
        id="health.specialty-telemedicine",
        label="Specialty Telemedicine (Derm, Nutrition, Chronic Care)",
        description="Virtual care for specific medical specialties with outcome tracking",
        category=BusinessModelType.HEALTHCARE,
        tam="$18B (specialty telehealth)",
        growth="19% CAGR, post-pandemic virtual care adoption",
        competition="Moderate - specialty expertise required",
        major_competitors=["Teladoc", "MDLive", "Doctor on Demand", "Hims & Hers"],
        cac_range="$300-$900",
        ltv="$2,500-$8,000",
        barriers=["Provider credentialing", "State licensing requirements", "Insurance contracting", "Clinical protocols"],
        opportunities=["Chronic disease management", "Preventive care", "Second opinions", "Rural access"],
        scoring_factors=ScoringFactors(problem=75, underserved=65, demand=80, differentiation=70, economics=75, gtm=65),
        relevant_skills=["clinical operations", "provider recruitment", "telehealth compliance", "specialty expertise"],
    ),
    CategoryPivotOption(
        id="health.physical-therapy-telehealth",
        label="Physical Therapy & Wellness Coaching",
        description="Remote PT, pain management, and musculoskeletal care with video guidance",
        category=BusinessModelType.HEALTHCARE,
        tam="$8B (virtual PT and MSK care)",
        growth="17% CAGR, value-based care expansion",
        competition="Low - emerging category",
        major_competitors=["Hinge Health", "Sword Health", "Omada Health", "Kaia Health"],
        cac_range="$200-$600",
        ltv="$1,800-$5,000",
        barriers=["Exercise prescription liability", "Outcome measurement", "Insurance reimbursement", "Adherence tracking"],
        opportunities=["Post-surgical recovery", "Chronic pain management", "Injury prevention", "Elderly care"],
        scoring_factors=ScoringFactors(problem=80, underserved=75, demand=75, differentiation=75, economics=70, gtm=70),
        relevant_skills=["PT expertise", "MSK care", "outcome tracking", "wellness coaching"],
    ),
    CategoryPivotOption(
        id="health.senior-care-coordination",
        label="Senior Care Coordination & Telemedicine",
        description="Virtual care and care coordination for aging populations and caregivers",
        category=BusinessModelType.HEALTHCARE,
        tam="$12B (senior care technology)",
        growth="15% CAGR, aging population growth",
        competition="Moderate - fragmented market",
        major_competitors=["CareLinx", "Honor", "Papa", "DispatchHealth"],
        cac_range="$400-$1,200",
        ltv="$8,000-$20,000",
        barriers=["Technology adoption with elderly", "Caregiver coordination", "Medicare reimbursement", "Multi-stakeholder sales"],
        opportunities=["Chronic condition management", "Medication adherence", "Fall prevention", "Social isolation"],
        scoring_factors=ScoringFactors(problem=85, underserved=80, demand=75, differentiation=75, economics=70, gtm=60),
        relevant_skills=["geriatric care", "caregiver support", "care coordination", "Medicare knowledge"],
    ),
    CategoryPivotOption(
        id="health.pediatric-teletherapy",
        label="Pediatric Teletherapy & Developmental Services",
        description="Virtual speech, occupational, and behavioral therapy for children",
        category=BusinessModelType.HEALTHCARE,
        tam="$6B (pediatric therapy services)",
        growth="20% CAGR, early intervention demand",
        competition="Low - highly underserved",
        major_competitors=["Little Otter", "Brightline", "Hazel Health", "AbleTo Kids"],
        cac_range="$250-$700",
        ltv="$4,000-$12,000",
        barriers=["Parent engagement", "School partnerships", "Pediatric specialist shortage", "Insurance credentialing"],
        opportunities=["School-based services", "Autism support", "ADHD management", "Learning disabilities"],
        scoring_factors=ScoringFactors(problem=85, underserved=80, demand=80, differentiation=80, economics=65, gtm=65),
        relevant_skills=["pediatric therapy", "developmental psychology", "school partnerships", "parent communication"],
    ),
    CategoryPivotOption(
        id="health.womens-health-telehealth",
        label="Women's Health Telehealth",
        description="Virtual care for reproductive health, prenatal care, and menopause management",
        category=BusinessModelType.HEALTHCARE,
        tam="$10B (women's health digital)",
        growth="18% CAGR, reproductive health access focus",
        competition="Moderate - privacy and trust critical",
        major_competitors=["Maven Clinic", "Tia", "Nurx", "Ro for Women"],
        cac_range="$150-$500",
        ltv="$2,000-$6,000",
        barriers=["State regulations", "Prescription policies", "Sensitive content", "Insurance coverage gaps"],
        opportunities=["Fertility care", "Pregnancy support", "Postpartum care", "Menopause management"],
        scoring_factors=ScoringFactors(problem=75, underserved=70, demand=80, differentiation=70, economics=70, gtm=70),
        relevant_skills=["women's health expertise", "OB/GYN partnerships", "reproductive health policy", "patient education"],
    ),
    CategoryPivotOption(
        id="health.behavioral-health-substance-abuse",
        label="Substance Abuse & Addiction Treatment",
        description="Virtual addiction treatment, recovery coaching, and peer support",
        category=BusinessModelType.HEALTHCARE,
        tam="$9B (digital addiction treatment)",
        growth="16% CAGR, opioid crisis response",
        competition="Moderate - clinical protocols required",
        major_competitors=["Workit Health", "Ophelia", "Boulder Care", "Monument"],
        cac_range="$300-$900",
        ltv="$5,000-$15,000",
        barriers=["Crisis intervention protocols", "Medication management", "Recovery support", "Stigma reduction"],
        opportunities=["Medication-assisted treatment", "Family support", "Employer partnerships", "Justice system integration"],
        scoring_factors=ScoringFactors(problem=90, underserved=85, demand=75, differentiation=80, economics=70, gtm=55),
        relevant_skills=["addiction medicine", "behavioral health", "crisis management", "recovery support"],
    ),
)

FOOD_SERVICE_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="corporate-meal-programs",
        label="Corporate Meal Programs (B2B Catering)",
        description="Office meal delivery and corporate catering with recurring contracts",
        category=BusinessModelType.FOOD_SERVICE,
        tam="$18B (corporate food service)",
        growth="14% CAGR, hybrid work driving meal benefits",
        competition="Moderate - relationship-based sales",
        major_competitors=["ezCater", "Fooda", "ZeroCater", "Crafty"],
        cac_range="$2,000-$6,000",
        ltv="$50,000-$150,000",
        barriers=["Enterprise sales cycles", "Consistent quality at scale", "Logistics complexity"],
        opportunities=["Hybrid work meal budgets", "Employee retention", "Dietary accommodations"],
        scoring_factors=ScoringFactors(problem=70, underserved=60, demand=75, differentiation=65, economics=80, gtm=60),
        relevant_skills=["B2B sales", "food operations", "logistics", "account management"],
    ),
    CategoryPivotOption(
        id="meal-prep-subscription",
        label="Meal Prep Subscription Service",
        description="Weekly prepared meal boxes with macro tracking and dietary customization",
        category=BusinessModelType.FOOD_SERVICE,
        tam="$10B (meal kit and prep market)",
        growth="16% CAGR, health consciousness growing",
        competition="High but niche opportunities",
        major_competitors=["Factor", "Trifecta", "Territory Foods", "Freshly"],
        cac_range="$80-$200",
        ltv="$1,500-$4,000",
        barriers=["Food safety regulations", "Churn management", "Cold chain logistics"],
        opportunities=["Fitness community partnerships", "Medical nutrition therapy", "Performance nutrition"],
        scoring_factors=ScoringFactors(problem=65, underserved=55, demand=70, differentiation=60, economics=65, gtm=65),
        relevant_skills=["nutrition knowledge", "food prep operations", "subscription management", "logistics"],
    ),
    CategoryPivotOption(
        id="virtual-restaurant-brands",
        label="Virtual Restaurant Brand Network",
        description="Multiple digital-only restaurant concepts from one kitchen with platform optimization",
        category=BusinessModelType.FOOD_SERVICE,
        tam="$8B (ghost kitchen market)",
        growth="20% CAGR, delivery platform growth",
        competition="Moderate - operational excellence required",
        major_competitors=["Virtual Dining Concepts", "Nextbite", "C3", "Kitchen United"],
        cac_range="$50-$150",
        ltv="$800-$2,500",
        barriers=["Brand dilution risk", "Platform commission costs", "Kitchen efficiency"],
        opportunities=["Platform algorithm optimization", "Daypart optimization", "Celebrity partnerships"],
        scoring_factors=ScoringFactors(problem=60, underserved=60, demand=70, differentiation=65, economics=60, gtm=70),
        relevant_skills=["restaurant operations", "brand development", "platform marketing", "kitchen efficiency"],
    ),
    CategoryPivotOption(
        id="dietary-specialty-meals",
        label="Dietary Specialty Meal Delivery",
        description="Medical-grade meals for specific diets: diabetic, renal, allergen-free, autoimmune",
        category=BusinessModelType.FOOD_SERVICE,
        tam="$6B (specialty diet food)",
        growth="18% CAGR, chronic disease management",
        competition="Low - medical expertise required",
        major_competitors=["Magic Kitchen", "Mom's Meals", "BistroMD", "Diet-to-Go"],
        cac_range="$150-$400",
        ltv="$3,000-$8,000",
        barriers=["Nutritionist partnerships", "Medical claims regulations", "Insurance reimbursement"],
        opportunities=["Diabetes management", "Kidney disease", "Food allergies", "Autoimmune protocols"],
        scoring_factors=ScoringFactors(problem=80, underserved=75, demand=70, differentiation=80, economics=70, gtm=60),
        relevant_skills=["clinical nutrition", "medical partnerships", "food safety", "dietary compliance"],
    ),
    CategoryPivotOption(
        id="senior-meal-delivery",
        label="Senior Nutrition & Meal Delivery",
        description="Age-appropriate meals with nutrition tracking and caregiver coordination",
        category=BusinessModelType.FOOD_SERVICE,
        tam="$9B (senior meal services)",
        growth="12% CAGR, aging population",
        competition="Moderate - Medicaid/Medicare opportunities",
        major_competitors=["Mom's Meals", "Silver Cuisine", "Meals on Wheels", "Magic Kitchen"],
        cac_range="$200-$500",
        ltv="$5,000-$15,000",
        barriers=["Medicare/Medicaid navigation", "Soft diet requirements", "Delivery coordination"],
        opportunities=["Medicare Advantage partnerships", "Chronic disease management", "Hospital discharge"],
        scoring_factors=ScoringFactors(problem=85, underserved=80, demand=75, differentiation=75, economics=75, gtm=60),
        relevant_skills=["geriatric nutrition", "Medicare knowledge", "caregiver communication", "care coordination"],
    ),
    CategoryPivotOption(
        id="athlete-performance-nutrition",
        label="Athlete Performance Nutrition",
        description="Sports nutrition meal plans with macro optimization and timing protocols",
        category=BusinessModelType.FOOD_SERVICE,
        tam="$4B (sports nutrition meals)",
        growth="15% CAGR, sports performance focus",
        competition="Moderate - specialized knowledge required",
        major_competitors=["Trifecta", "Icon Meals", "Performance Kitchen", "Eat Clean Bro"],
        cac_range="$100-$300",
        ltv="$2,000-$6,000",
        barriers=["Sports nutrition expertise", "Athlete partnerships", "Seasonal demand"],
        opportunities=["College athletics", "Professional teams", "CrossFit gyms", "Bodybuilding"],
        scoring_factors=ScoringFactors(problem=70, underserved=70, demand=65, differentiation=75, economics=65, gtm=70),
        relevant_skills=["sports nutrition", "athlete relationships", "performance tracking", "gym partnerships"],
    ),
    CategoryPivotOption(
        id="family-meal-solution",
        label="Family Meal Solutions",
        description="Kid-friendly, family-sized meals with nutritional education and variety",
        category=BusinessModelType.FOOD_SERVICE,
        tam="$12B (family meal delivery)",
        growth="13% CAGR, dual-income families",
        competition="High but segmentation opportunities",
        major_competitors=["HelloFresh Family", "Home Chef", "Blue Apron", "EveryPlate"],
        cac_range="$80-$200",
        ltv="$1,200-$3,500",
        barriers=["Kid taste preferences", "Price sensitivity", "Subscription fatigue"],
        opportunities=["Picky eater solutions", "Nutrition education", "School partnerships"],
        scoring_factors=ScoringFactors(problem=65, underserved=60, demand=75, differentiation=60, economics=60, gtm=70),
        relevant_skills=["family nutrition", "child development", "parent marketing", "meal planning"],
    ),
)

DTC_SUBSCRIPTION_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="dtc.coffee-subscription",
        category=BusinessModelType.DTC_SUBSCRIPTION,
        label="Curated Coffee Subscription",
        description="Tiered monthly coffee boxes with taste quiz onboarding and sampler-first approach",
        tam="$38B (global coffee market; subscription subset growing rapidly)",
        growth="10% CAGR for subscription coffee",
        competition="Moderate - strong DTC brands but room for niche curation",
        major_competitors=["Trade Coffee", "Blue Bottle", "Atlas Coffee Club"],
        cac_range="$35-$120",
        ltv="$300-$900",
        barriers=["churn management", "shipping costs", "freshness logistics"],
        opportunities=["taste quiz personalization", "sampler boxes", "pause/skip UX"],
        scoring_factors=ScoringFactors(problem=55, underserved=60, demand=65, differentiation=60, economics=58, gtm=65),
        relevant_skills=["branding", "ecommerce", "lifecycle marketing"],
    ),
    CategoryPivotOption(
        id="dtc.pet-treat-subscription",
        category=BusinessModelType.DTC_SUBSCRIPTION,
        label="Pet Treat Subscription",
        description="Functional treats (allergies, hip health) with vet-backed content and bundles",
        tam="$12B (pet treats; subscription subset fast-growing)",
        growth="11% CAGR",
        competition="Moderate - fragmented DTC and marketplaces",
        major_competitors=["BarkBox", "Chewy Autoship", "PetPlate"],
        cac_range="$40-$110",
        ltv="$250-$800",
        barriers=["returns/quality control", "ingredient sourcing", "regulatory labeling"],
        opportunities=["functional SKUs", "bundles & cross-sell", "UGC & community"],
        scoring_factors=ScoringFactors(problem=58, underserved=62, demand=64, differentiation=62, economics=60, gtm=66),
        relevant_skills=["brand storytelling", "influencer marketing", "supply chain basics"],
    ),
    CategoryPivotOption(
        id="specialty-food-subscriptions",
        category=BusinessModelType.DTC_SUBSCRIPTION,
        label="Specialty Food Subscriptions",
        description="Curated food products with educational content and sourcing stories",
        tam="$8B (specialty food subscription market)",
        growth="15% CAGR, premium food consciousness growing",
        competition="Moderate - category specialization available",
        major_competitors=["Blue Apron", "HelloFresh", "Trade Coffee", "Atlas Coffee"],
        cac_range="-",
        ltv="-",
        barriers=["Inventory management", "Shipping costs", "Seasonal sourcing"],
        opportunities=["Dietary specialization", "Sustainability focus", "Educational content"],
        scoring_factors=ScoringFactors(problem=55, underserved=50, demand=65, differentiation=60, economics=55, gtm=60),
        relevant_skills=[],
    ),
    CategoryPivotOption(
        id="artisan-craft-subscriptions",
        category=BusinessModelType.DTC_SUBSCRIPTION,
        label="Artisan Craft Subscriptions",
        description="Monthly delivery of handmade items with maker stories and techniques",
        tam="$2.5B (craft subscription subset)",
        growth="12% CAGR, handmade appreciation trend",
        competition="Low - highly fragmented market",
        major_competitors=["Annie's Kit Club", "Craftsy", "KiwiCo (adjacent)"],
        cac_range="-",
        ltv="-",
        barriers=["Artisan coordination", "Quality consistency", "Shipping fragility"],
        opportunities=["Skill development focus", "Local artisan partnerships", "Gift market"],
        scoring_factors=ScoringFactors(problem=60, underserved=65, demand=55, differentiation=70, economics=50, gtm=55),
        relevant_skills=[],
    ),
    CategoryPivotOption(
        id="wellness-lifestyle-subscriptions",
        category=BusinessModelType.DTC_SUBSCRIPTION,
        label="Wellness & Lifestyle Subscriptions",
        description="Health-focused products with personalization and wellness education",
        tam="$12B (wellness subscription market)",
        growth="18% CAGR, health consciousness accelerating",
        competition="High but segmentation opportunities",
        major_competitors=["Ritual", "Care/of", "FabFitFun", "Birchbox"],
        cac_range="-",
        ltv="-",
        barriers=["Regulatory compliance", "Personalization complexity", "Customer acquisition costs"],
        opportunities=["AI personalization", "Clinical partnerships", "Corporate wellness"],
        scoring_factors=ScoringFactors(problem=65, underserved=55, demand=75, differentiation=60, economics=65, gtm=65),
        relevant_skills=[],
    ),
    CategoryPivotOption(
        id="b2b-office-subscriptions",
        category=BusinessModelType.DTC_SUBSCRIPTION,
        label="B2B Office Subscriptions",
        description="Workplace supplies and employee perks delivered to offices",
        tam="$5B (office supply subscription)",
        growth="10% CAGR, remote work driving demand",
        competition="Moderate - traditional suppliers dominant",
        major_competitors=["Amazon Business", "Staples", "Grubhub Corporate"],
        cac_range="-",
        ltv="-",
        barriers=["B2B sales cycles", "Procurement integration", "Volume pricing pressure"],
        opportunities=["Remote work packages", "Employee wellness", "Sustainability focus"],
        scoring_factors=ScoringFactors(problem=70, underserved=60, demand=70, differentiation=55, economics=75, gtm=50),
        relevant_skills=[],
    ),
)

SERVICES_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="services.ai-leadgen-agency",
        category=BusinessModelType.SERVICES,
        label="AI-Powered Lead Gen Agency",
        description="Outbound + warm-up + personalization with strict deliverables and transparent reporting",
        tam="$4B (SMB lead gen services)",
        growth="7% CAGR",
        competition="High - commoditized, but execution and niche focus win",
        major_competitors=["CIENCE", "Belkins", "Martal Group"],
        cac_range="$0-$300 (service referrals and outbound)",
        ltv="$8,000-$30,000",
        barriers=["client churn risk", "results dependency", "deliverability constraints"],
        opportunities=["vertical focus", "SOPs and playbooks", "rev-share pricing"],
        scoring_factors=ScoringFactors(problem=68, underserved=60, demand=62, differentiation=58, economics=70, gtm=62),
        relevant_skills=["sales ops", "copywriting", "data enrichment"],
    ),
    CategoryPivotOption(
        id="services.compliance-docs",
        category=BusinessModelType.SERVICES,
        label="Compliance Documentation Service",
        description="Packaged compliance docs with expert review for SMEs (SOC2-lite, HIPAA-readiness)",
        tam="$3B (compliance advisory for SMBs)",
        growth="8% CAGR",
        competition="Moderate - fragmented boutiques",
        major_competitors=["Vanta (software)", "Drata (software)", "Local consultancies"],
        cac_range="$300-$900",
        ltv="$10,000-$40,000",
        barriers=["expertise requirements", "liability/risk management"],
        opportunities=["productized service tiers", "audit partnerships", "template libraries"],
        scoring_factors=ScoringFactors(problem=72, underserved=65, demand=60, differentiation=62, economics=78, gtm=55),
        relevant_skills=["compliance", "technical writing", "project management"],
    ),
)


# Merged into physical-product candidates when the idea has artisan signals
ARTISAN_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    CategoryPivotOption(
        id="physical.artisan-marketplace",
        category=BusinessModelType.MARKETPLACE,
        label="Premium Artisan Goods Marketplace",
        description="Curated platform for high-end handcrafted leather & accessory brands",
        tam="$5B (luxury artisan accessories online)",
        growth="10% CAGR",
        competition="Fragmented boutiques & Etsy saturation",
        major_competitors=["Etsy (generic)", "1stDibs (luxury decor)", "NuOrder (B2B)"],
        cac_range="$120-$300",
        ltv="$1,200-$3,500",
        barriers=["Supply curation", "Trust & authenticity", "Fulfillment SLAs"],
        opportunities=["Brand storytelling engine", "Authentication layer", "Limited drops"],
        scoring_factors=ScoringFactors(problem=58, underserved=62, demand=70, differentiation=72, economics=65, gtm=60),
        relevant_skills=["craftsmanship", "branding", "marketplace ops"],
    ),
    CategoryPivotOption(
        id="physical.corporate-gifting-platform",
        category=BusinessModelType.PHYSICAL_PRODUCT,
        label="Bespoke Corporate Gifting Service",
        description="Personalized premium leather gift kits for enterprise onboarding & retention",
        tam="$22B (corporate gifting)",
        growth="8% CAGR",
        competition="Moderate – swag aggregators",
        major_competitors=["Swag.com", "Gemnote", "Postal"],
        cac_range="$300-$800",
        ltv="$10,000-$40,000",
        barriers=["Procurement cycles", "Inventory risk"],
        opportunities=["Sustainability angle", "On-demand personalization", "Usage analytics"],
        scoring_factors=ScoringFactors(problem=60, underserved=60, demand=68, differentiation=70, economics=78, gtm=58),
        relevant_skills=["b2b sales", "supply chain", "craftsmanship"],
    ),
    CategoryPivotOption(
        id="physical.vertical-industry-gear",
        category=BusinessModelType.PHYSICAL_PRODUCT,
        label="Vertical-Specific Custom Leather Gear",
        description="Highly durable, branded field & travel gear for tech execs / creative pros",
        tam="$3B (premium work accessories)",
        growth="7% CAGR",
        competition="Brand-heavy incumbents",
        major_competitors=["Bellroy", "Tumi", "Saddleback"],
        cac_range="$140-$280",
        ltv="$900-$2,400",
        barriers=["Material sourcing", "Brand trust"],
        opportunities=["Modular inserts", "RFID / tracker integration", "Limited collabs"],
        scoring_factors=ScoringFactors(problem=55, underserved=58, demand=62, differentiation=74, economics=64, gtm=57),
        relevant_skills=["design", "craftsmanship", "brand storytelling"],
    ),
    CategoryPivotOption(
        id="physical.sustainable-supply-brand",
        category=BusinessModelType.PHYSICAL_PRODUCT,
        label="Traceable Sustainable Leather Brand",
        description="Full supply-chain transparency & upcycled / regenerative sourcing",
        tam="$6B (ethical leather subset)",
        growth="11% CAGR",
        competition="Growing – limited verification tooling",
        major_competitors=["Allbirds (analog)", "Nisolo", "Patagonia accessories"],
        cac_range="$130-$260",
        ltv="$1,500-$3,000",
        barriers=["Certification costs", "Material availability"],
        opportunities=["Tokenized provenance", "Repair / refurb loop", "Corporate ESG gifting"],
        scoring_factors=ScoringFactors(problem=57, underserved=63, demand=66, differentiation=76, economics=61, gtm=60),
        relevant_skills=["sustainable sourcing", "supply chain", "branding"],
    ),
)

ARTISAN_PIVOT_IDS: FrozenSet[str] = frozenset(p.id for p in ARTISAN_PIVOTS)

CATALOG_BY_TYPE: Dict[BusinessModelType, Tuple[CategoryPivotOption, ...]] = {
    BusinessModelType.ENTERPRISE_SAAS: ENTERPRISE_SAAS_PIVOTS,
    BusinessModelType.FOOD_SERVICE: FOOD_SERVICE_PIVOTS,
    BusinessModelType.PHYSICAL_PRODUCT: PHYSICAL_PRODUCT_PIVOTS,
    BusinessModelType.MARKETPLACE: MARKETPLACE_PIVOTS,
    BusinessModelType.SAAS_B2B: SAAS_PIVOTS,
    BusinessModelType.HEALTHCARE: HEALTHCARE_PIVOTS,
    BusinessModelType.FINTECH: FINTECH_PIVOTS,
    BusinessModelType.EDTECH: EDTECH_PIVOTS,
    BusinessModelType.MOBILE_APP: MOBILE_APP_PIVOTS,
    BusinessModelType.DTC_SUBSCRIPTION: DTC_SUBSCRIPTION_PIVOTS,
    BusinessModelType.SERVICES: SERVICES_PIVOTS,
}

ALL_PIVOTS: Tuple[CategoryPivotOption, ...] = (
    FOOD_SERVICE_PIVOTS
    + SAAS_PIVOTS
    + MARKETPLACE_PIVOTS
    + PHYSICAL_PRODUCT_PIVOTS
    + DTC_SUBSCRIPTION_PIVOTS
    + SERVICES_PIVOTS
    + EDTECH_PIVOTS
    + MOBILE_APP_PIVOTS
    + HEALTHCARE_PIVOTS
    + FINTECH_PIVOTS
)
