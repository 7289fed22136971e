"""English locale strings.

Keys are dot-namespaced by page section (``nav.*``, ``hero.*`` ...).
Every key here must also exist in ``ar.py``; ``assert_parity()`` enforces it.
"""

STRINGS: dict[str, str] = {
    # ---------------------------------------------------------------------------
    # Navbar
    # ---------------------------------------------------------------------------
    "nav.home": "Home",
    "nav.about": "About",
    "nav.services": "Services",
    "nav.portfolio": "Portfolio",
    "nav.packages": "Packages",
    "nav.booking": "Book Now",
    "nav.admin": "Admin",
    "nav.login": "Login",
    "nav.logout": "Logout",

    # ---------------------------------------------------------------------------
    # Language toggle
    # ---------------------------------------------------------------------------
    "language.toggle": "العربية",
    "language.unknown": "Unsupported language: {code}",

    # ---------------------------------------------------------------------------
    # Hero
    # ---------------------------------------------------------------------------
    "hero.title": "Transforming Ideas into",
    "hero.title.highlight": "Digital Reality",
    "hero.subtitle": (
        "With over 3 years of experience, we craft exceptional digital "
        "experiences that drive growth and innovation for businesses worldwide."
    ),
    "hero.cta": "Book a Free Consultation",
    "hero.secondary": "View Our Work",

    # ---------------------------------------------------------------------------
    # About
    # ---------------------------------------------------------------------------
    "about.title": "About Us",
    "about.subtitle": "Who We Are",
    "about.description": (
        "We are a passionate team of designers, developers, and strategists "
        "dedicated to creating innovative digital solutions. With over 3 years "
        "of combined experience, we have helped businesses of all sizes achieve "
        "their digital goals."
    ),
    "about.experience": "Years of Experience",
    "about.projects": "Projects Completed",
    "about.clients": "Happy Clients",
    "about.support": "24/7 Support",

    # ---------------------------------------------------------------------------
    # Services
    # ---------------------------------------------------------------------------
    "services.title": "Our Services",
    "services.subtitle": "What We Offer",
    "services.uiux.title": "UI/UX Design",
    "services.uiux.description": (
        "Beautiful, intuitive designs that enhance user experience and drive engagement."
    ),
    "services.web.title": "Web Development",
    "services.web.description": (
        "Fast, responsive, and scalable web applications built with modern technologies."
    ),
    "services.mobile.title": "Mobile Development",
    "services.mobile.description": (
        "Native and cross-platform mobile apps that deliver exceptional performance."
    ),
    "services.seo.title": "SEO Optimization",
    "services.seo.description": (
        "Strategic SEO solutions to boost your online visibility and organic traffic."
    ),

    # ---------------------------------------------------------------------------
    # How we work
    # ---------------------------------------------------------------------------
    "howWeWork.badge": "Our Process",
    "howWeWork.title": "How We Work",
    "howWeWork.subtitle": "A clear, proven process from first idea to launch.",
    "howWeWork.step1.title": "Discovery",
    "howWeWork.step1.desc": "We learn about your business, goals and audience.",
    "howWeWork.step2.title": "Design",
    "howWeWork.step2.desc": "We shape wireframes and visuals around your users.",
    "howWeWork.step3.title": "Development",
    "howWeWork.step3.desc": "We build, test and refine your product.",
    "howWeWork.step4.title": "Launch",
    "howWeWork.step4.desc": "We ship it and keep it running smoothly.",
    "howWeWork.support": "Ongoing support after launch",

    # ---------------------------------------------------------------------------
    # Why choose us
    # ---------------------------------------------------------------------------
    "whyUs.badge": "Why Choose Us",
    "whyUs.title": "The Right Choice",
    "whyUs.subtitle": (
        "Partner with a team that's committed to your success. "
        "Here's what sets us apart."
    ),
    "whyUs.whatYouGet": "What You Get",
    "whyUs.everythingYouNeed": "Everything You Need to Succeed",
    "whyUs.cta": "Start Your Project",
    "whyUs.feature1.title": "3+ Years of Experience",
    "whyUs.feature1.desc": (
        "Battle-tested solutions from years of solving complex problems "
        "across various industries."
    ),
    "whyUs.feature2.title": "Professional Team",
    "whyUs.feature2.desc": (
        "Skilled developers, designers, and project managers dedicated to your success."
    ),
    "whyUs.feature3.title": "High-Quality Delivery",
    "whyUs.feature3.desc": (
        "We never compromise on quality. Every project meets the highest standards."
    ),
    "whyUs.feature4.title": "Client-Focused Approach",
    "whyUs.feature4.desc": (
        "Your goals are our priority. We work closely with you at every step."
    ),
    "whyUs.benefit1": "Agile development methodology",
    "whyUs.benefit2": "Regular progress updates",
    "whyUs.benefit3": "Transparent communication",
    "whyUs.benefit4": "Post-launch support",
    "whyUs.benefit5": "Scalable solutions",
    "whyUs.benefit6": "Security best practices",

    # ---------------------------------------------------------------------------
    # Portfolio
    # ---------------------------------------------------------------------------
    "portfolio.title": "Our Portfolio",
    "portfolio.subtitle": "Recent Projects",
    "portfolio.viewProject": "View Project",
    "portfolio.category.fullStack": "Full Stack",
    "portfolio.project1.title": "E-Commerce Platform",
    "portfolio.project2.title": "Banking Mobile App",
    "portfolio.project3.title": "Healthcare Dashboard",
    "portfolio.project4.title": "Real Estate Platform",
    "portfolio.project5.title": "Fitness Tracking App",
    "portfolio.project6.title": "Restaurant Booking System",

    # ---------------------------------------------------------------------------
    # Packages
    # ---------------------------------------------------------------------------
    "packages.badge": "Pricing",
    "packages.title": "Our Packages",
    "packages.subtitle": "Pick the package that fits your project.",
    "packages.popular": "Most Popular",
    "packages.startingFrom": "Starting From",
    "packages.note": "Need something custom? Contact us for a tailored quote.",

    # ---------------------------------------------------------------------------
    # Booking
    # ---------------------------------------------------------------------------
    "booking.title": "Book a Consultation",
    "booking.subtitle": "Let's discuss your project",
    "booking.description": (
        "Book a free consultation with our team to discuss your project "
        "and get a customized action plan."
    ),
    "booking.contact.email": "Email",
    "booking.contact.phone": "Phone",
    "booking.form.name": "Full Name",
    "booking.form.email": "Email Address",
    "booking.form.phone": "Phone Number",
    "booking.form.service": "Service Type",
    "booking.form.date": "Preferred Date",
    "booking.form.time": "Preferred Time",
    "booking.form.message": "Message",
    "booking.form.submit": "Book Consultation",
    "booking.form.submitting": "Submitting...",
    "booking.form.submitted": "Successfully Submitted!",
    "booking.form.bookAnother": "Book Another",
    "booking.form.success": (
        "Your booking has been submitted successfully! We will contact you soon."
    ),
    "booking.form.error": "An error occurred. Please try again.",
    "booking.form.selectService": "Select a service",
    "booking.form.selectTime": "Select a time",

    # ---------------------------------------------------------------------------
    # Footer
    # ---------------------------------------------------------------------------
    "footer.description": (
        "Transforming ideas into digital reality with innovative solutions "
        "and exceptional design."
    ),
    "footer.quickLinks": "Quick Links",
    "footer.contact": "Contact Us",
    "footer.privacy": "Privacy Policy",
    "footer.terms": "Terms of Service",
    "footer.rights": "© {year} {name}. All rights reserved.",

    # ---------------------------------------------------------------------------
    # Admin
    # ---------------------------------------------------------------------------
    "admin.title": "Admin Dashboard",
    "admin.bookings": "Booking Requests",
    "admin.noBookings": "No bookings found.",
    "admin.status.pending": "Pending",
    "admin.status.approved": "Approved",
    "admin.status.rejected": "Rejected",
    "admin.actions": "Actions",
    "admin.delete": "Delete",

    # ---------------------------------------------------------------------------
    # Auth
    # ---------------------------------------------------------------------------
    "auth.login": "Login",
    "auth.signup": "Sign Up",
    "auth.email": "Email",
    "auth.password": "Password",
    "auth.noAccount": "Don't have an account?",
    "auth.hasAccount": "Already have an account?",
    "auth.loginSuccess": "Logged in successfully!",
    "auth.signupSuccess": "Account created successfully!",
    "auth.error": "Authentication error. Please try again.",
}
