"""Arabic locale strings (right-to-left).

Mirrors the key set of ``en.py`` one-to-one.
"""

STRINGS: dict[str, str] = {
    # ---------------------------------------------------------------------------
    # Navbar
    # ---------------------------------------------------------------------------
    "nav.home": "الرئيسية",
    "nav.about": "من نحن",
    "nav.services": "خدماتنا",
    "nav.portfolio": "أعمالنا",
    "nav.packages": "الباقات",
    "nav.booking": "احجز الآن",
    "nav.admin": "لوحة التحكم",
    "nav.login": "تسجيل الدخول",
    "nav.logout": "تسجيل الخروج",

    # ---------------------------------------------------------------------------
    # Language toggle
    # ---------------------------------------------------------------------------
    "language.toggle": "English",
    "language.unknown": "لغة غير مدعومة: {code}",

    # ---------------------------------------------------------------------------
    # Hero
    # ---------------------------------------------------------------------------
    "hero.title": "نحول أفكارك إلى",
    "hero.title.highlight": "واقع رقمي",
    "hero.subtitle": (
        "بخبرة تزيد عن 3 سنوات، نقدم تجارب رقمية استثنائية تدفع النمو "
        "والابتكار للشركات حول العالم."
    ),
    "hero.cta": "احجز استشارة مجانية",
    "hero.secondary": "شاهد أعمالنا",

    # ---------------------------------------------------------------------------
    # About
    # ---------------------------------------------------------------------------
    "about.title": "من نحن",
    "about.subtitle": "تعرف علينا",
    "about.description": (
        "نحن فريق شغوف من المصممين والمطورين والاستراتيجيين المكرسين لإنشاء "
        "حلول رقمية مبتكرة. مع أكثر من 3 سنوات من الخبرة المجمعة، ساعدنا "
        "الشركات من جميع الأحجام في تحقيق أهدافها الرقمية."
    ),
    "about.experience": "سنوات الخبرة",
    "about.projects": "مشروع مكتمل",
    "about.clients": "عميل سعيد",
    "about.support": "دعم على مدار الساعة",

    # ---------------------------------------------------------------------------
    # Services
    # ---------------------------------------------------------------------------
    "services.title": "خدماتنا",
    "services.subtitle": "ما نقدمه",
    "services.uiux.title": "تصميم واجهات المستخدم",
    "services.uiux.description": "تصاميم جميلة وبديهية تعزز تجربة المستخدم وتزيد التفاعل.",
    "services.web.title": "تطوير المواقع",
    "services.web.description": "تطبيقات ويب سريعة ومتجاوبة وقابلة للتوسع مبنية بأحدث التقنيات.",
    "services.mobile.title": "تطوير التطبيقات",
    "services.mobile.description": "تطبيقات جوال أصلية ومتعددة المنصات تقدم أداءً استثنائياً.",
    "services.seo.title": "تحسين محركات البحث",
    "services.seo.description": (
        "حلول SEO استراتيجية لتعزيز ظهورك على الإنترنت وزيادة الزيارات العضوية."
    ),

    # ---------------------------------------------------------------------------
    # How we work
    # ---------------------------------------------------------------------------
    "howWeWork.badge": "طريقة عملنا",
    "howWeWork.title": "كيف نعمل",
    "howWeWork.subtitle": "خطوات واضحة ومجربة من الفكرة الأولى حتى الإطلاق.",
    "howWeWork.step1.title": "الاستكشاف",
    "howWeWork.step1.desc": "نتعرف على عملك وأهدافك وجمهورك.",
    "howWeWork.step2.title": "التصميم",
    "howWeWork.step2.desc": "نصمم الهيكل والواجهات حول احتياجات مستخدميك.",
    "howWeWork.step3.title": "التطوير",
    "howWeWork.step3.desc": "نبني منتجك ونختبره ونحسنه.",
    "howWeWork.step4.title": "الإطلاق",
    "howWeWork.step4.desc": "نطلق المشروع ونضمن استمراره بسلاسة.",
    "howWeWork.support": "دعم مستمر بعد الإطلاق",

    # ---------------------------------------------------------------------------
    # Why choose us
    # ---------------------------------------------------------------------------
    "whyUs.badge": "لماذا نحن",
    "whyUs.title": "الخيار الصحيح",
    "whyUs.subtitle": "شارك فريقًا ملتزمًا بنجاحك. إليك ما يميزنا.",
    "whyUs.whatYouGet": "ما تحصل عليه",
    "whyUs.everythingYouNeed": "كل ما تحتاجه للنجاح",
    "whyUs.cta": "ابدأ مشروعك",
    "whyUs.feature1.title": "+3 سنوات من الخبرة",
    "whyUs.feature1.desc": "حلول مجربة من سنوات حل المشكلات المعقدة عبر مختلف الصناعات.",
    "whyUs.feature2.title": "فريق محترف",
    "whyUs.feature2.desc": "مطورون ومصممون ومديرو مشاريع ماهرون ملتزمون بنجاحك.",
    "whyUs.feature3.title": "تسليم عالي الجودة",
    "whyUs.feature3.desc": "لا نساوم أبدًا على الجودة. كل مشروع يلبي أعلى المعايير.",
    "whyUs.feature4.title": "نهج يركز على العميل",
    "whyUs.feature4.desc": "أهدافك هي أولويتنا. نعمل معك عن كثب في كل خطوة.",
    "whyUs.benefit1": "منهجية التطوير الرشيقة",
    "whyUs.benefit2": "تحديثات منتظمة للتقدم",
    "whyUs.benefit3": "تواصل شفاف",
    "whyUs.benefit4": "دعم ما بعد الإطلاق",
    "whyUs.benefit5": "حلول قابلة للتوسع",
    "whyUs.benefit6": "أفضل ممارسات الأمان",

    # ---------------------------------------------------------------------------
    # Portfolio
    # ---------------------------------------------------------------------------
    "portfolio.title": "أعمالنا",
    "portfolio.subtitle": "مشاريع حديثة",
    "portfolio.viewProject": "عرض المشروع",
    "portfolio.category.fullStack": "تطوير متكامل",
    "portfolio.project1.title": "منصة تجارة إلكترونية",
    "portfolio.project2.title": "تطبيق بنكي",
    "portfolio.project3.title": "لوحة تحكم صحية",
    "portfolio.project4.title": "منصة عقارية",
    "portfolio.project5.title": "تطبيق لياقة بدنية",
    "portfolio.project6.title": "نظام حجز مطاعم",

    # ---------------------------------------------------------------------------
    # Packages
    # ---------------------------------------------------------------------------
    "packages.badge": "الأسعار",
    "packages.title": "باقاتنا",
    "packages.subtitle": "اختر الباقة التي تناسب مشروعك.",
    "packages.popular": "الأكثر شعبية",
    "packages.startingFrom": "يبدأ من",
    "packages.note": "تحتاج إلى حل مخصص؟ تواصل معنا للحصول على عرض سعر يناسبك.",

    # ---------------------------------------------------------------------------
    # Booking
    # ---------------------------------------------------------------------------
    "booking.title": "احجز استشارة",
    "booking.subtitle": "دعنا نناقش مشروعك",
    "booking.description": (
        "احجز استشارة مجانية مع فريقنا لمناقشة مشروعك والحصول على خطة عمل مخصصة."
    ),
    "booking.contact.email": "البريد الإلكتروني",
    "booking.contact.phone": "الهاتف",
    "booking.form.name": "الاسم الكامل",
    "booking.form.email": "البريد الإلكتروني",
    "booking.form.phone": "رقم الهاتف",
    "booking.form.service": "نوع الخدمة",
    "booking.form.date": "التاريخ المفضل",
    "booking.form.time": "الوقت المفضل",
    "booking.form.message": "الرسالة",
    "booking.form.submit": "إرسال الحجز",
    "booking.form.submitting": "جاري الإرسال...",
    "booking.form.submitted": "تم الإرسال بنجاح!",
    "booking.form.bookAnother": "حجز جديد",
    "booking.form.success": "تم إرسال حجزك بنجاح! سنتواصل معك قريباً.",
    "booking.form.error": "حدث خطأ. يرجى المحاولة مرة أخرى.",
    "booking.form.selectService": "اختر خدمة",
    "booking.form.selectTime": "اختر وقتاً",

    # ---------------------------------------------------------------------------
    # Footer
    # ---------------------------------------------------------------------------
    "footer.description": "نحول الأفكار إلى واقع رقمي من خلال حلول مبتكرة وتصميم استثنائي.",
    "footer.quickLinks": "روابط سريعة",
    "footer.contact": "تواصل معنا",
    "footer.privacy": "سياسة الخصوصية",
    "footer.terms": "الشروط والأحكام",
    "footer.rights": "© {year} {name}. جميع الحقوق محفوظة.",

    # ---------------------------------------------------------------------------
    # Admin
    # ---------------------------------------------------------------------------
    "admin.title": "لوحة التحكم",
    "admin.bookings": "طلبات الحجز",
    "admin.noBookings": "لا توجد حجوزات.",
    "admin.status.pending": "قيد الانتظار",
    "admin.status.approved": "مقبول",
    "admin.status.rejected": "مرفوض",
    "admin.actions": "الإجراءات",
    "admin.delete": "حذف",

    # ---------------------------------------------------------------------------
    # Auth
    # ---------------------------------------------------------------------------
    "auth.login": "تسجيل الدخول",
    "auth.signup": "إنشاء حساب",
    "auth.email": "البريد الإلكتروني",
    "auth.password": "كلمة المرور",
    "auth.noAccount": "ليس لديك حساب؟",
    "auth.hasAccount": "لديك حساب بالفعل؟",
    "auth.loginSuccess": "تم تسجيل الدخول بنجاح!",
    "auth.signupSuccess": "تم إنشاء الحساب بنجاح!",
    "auth.error": "خطأ في المصادقة. يرجى المحاولة مرة أخرى.",
}
