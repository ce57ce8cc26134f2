"""Species ids of bosses and other notable creatures."""

from enum import IntEnum


class TargetID(IntEnum):
    """Species ids of encounter targets."""

    Mordremoth = 15884
    # Raid
    ValeGuardian = 15438
    Gorseval = 15429
    Sabetha = 15375
    Slothasor = 16123
    Berg = 16088
    Zane = 16137
    Narella = 16125
    Matthias = 16115
    Escort = 16253
    KeepConstruct = 16235
    Xera = 16246
    Cairn = 17194
    MursaatOverseer = 17172
    Samarog = 17188
    Deimos = 17154
    SoullessHorror = 19767
    Desmina = 19828
    BrokenKing = 19691
    SoulEater = 19536
    EyeOfJudgement = 19651
    EyeOfFate = 19844
    Dhuum = 19450
    ConjuredAmalgamate = 43974
    CARightArm = 10142
    CALeftArm = 37464
    ConjuredAmalgamate_CHINA = 44885
    CARightArm_CHINA = 11053
    CALeftArm_CHINA = 38375
    Nikare = 21105
    Kenut = 21089
    Qadim = 20934
    Freezie = 21333
    Adina = 22006
    Sabir = 21964
    PeerlessQadim = 22000
    # Strike missions
    IcebroodConstruct = 22154
    VoiceOfTheFallen = 22343
    ClawOfTheFallen = 22481
    VoiceAndClaw = 22315
    FraenirOfJormag = 22492
    IcebroodConstructFraenir = 22436
    Boneskinner = 22521
    WhisperOfJormag = 22711
    VariniaStormsounder = 22836
    MaiTrinStrike = 24033
    EchoOfScarletBriarNM = 24768
    EchoOfScarletBriarCM = 25247
    Ankka = 23957
    MinisterLi = 24485
    MinisterLiCM = 24266
    GadgetTheDragonVoid1 = 43488
    GadgetTheDragonVoid2 = 1378
    VoidAmalgamate1 = 24375
    PrototypeVermilion = 25413
    PrototypeArsenite = 25415
    PrototypeIndigo = 25419
    PrototypeVermilionCM = 25414
    PrototypeArseniteCM = 25416
    PrototypeIndigoCM = 25423
    # Fractals
    MAMA = 17021
    Siax = 17028
    Ensolyss = 16948
    Skorvald = 17632
    Artsariiv = 17949
    Arkk = 17759
    MaiTrinFract = 19697
    ShadowMinotaur = 20682
    BroodQueen = 20742
    TheVoice = 20497
    AiKeeperOfThePeak = 23254
    # Golems
    MassiveGolem10M = 16169
    MassiveGolem4M = 16202
    MassiveGolem1M = 16178
    VitalGolem = 16198
    AvgGolem = 16177
    StdGolem = 16199
    LGolem = 19676
    MedGolem = 19645
    ConditionGolem = 16174
    PowerGolem = 16176
    # Open world
    SooWonOW = 35552


class TrashID(IntEnum):
    """Species ids of adds and other non-target creatures."""

    # Mordremoth
    SmotheringShadow = 15640
    Canach = 15501
    Braham = 15778
    Caithe = 15565
    BlightedRytlock = 15999
    BlightedBraham = 15553
    BlightedMarjory = 15572
    BlightedCaithe = 15916
    BlightedForgal = 15597
    BlightedSieran = 15979
    # Vale Guardian
    Seekers = 15426
    RedGuardian = 15433
    BlueGuardian = 15431
    GreenGuardian = 15420
    # Gorseval
    ChargedSoul = 15434
    EnragedSpirit = 16024
    AngeredSpirit = 16005
    # Sabetha
    Kernan = 15372
    Knuckles = 15404
    Karde = 15430
    BanditSapper = 15423
    BanditThug = 15397
    BanditArsonist = 15421
    # Slothasor
    Slubling1 = 16064
    Slubling2 = 16071
    Slubling3 = 16077
    Slubling4 = 16104
    # Trio
    BanditSaboteur = 16117
    Warg = 7481
    CagedWarg = 16129
    BanditAssassin = 16067
    BanditSapperTrio = 16074
    BanditDeathsayer = 16076
    BanditBrawler = 16066
    BanditBattlemage = 16093
    BanditCleric = 16101
    BanditBombardier = 16138
    BanditSniper = 16065
    NarellaTornado = 16092
    OilSlick = 16096
    Prisoner1 = 16056
    Prisoner2 = 16103
    # Matthias
    Spirit = 16105
    Spirit2 = 16114
    IcePatch = 16139
    Storm = 16108
    Tornado = 16068
    # Keep Construct
    Olson = 16244
    Engul = 16274
    Faerla = 16264
    Caulle = 16282
    Henley = 16236
    Jessica = 16278
    Galletta = 16228
    Ianim = 16248
    KeepConstructCore = 16261
    GreenPhantasm = 16237
    InsidiousProjection = 16227
    UnstableLeyRift = 16277
    RadiantPhantasm = 16259
    CrimsonPhantasm = 16257
    RetrieverProjection = 16249
    # Twisted Castle
    HauntingStatue = 16247
    # Xera
    XerasPhantasm = 16225
    WhiteMantleSeeker1 = 16238
    WhiteMantleSeeker2 = 16283
    WhiteMantleKnight1 = 16251
    WhiteMantleKnight2 = 16287
    WhiteMantleBattleMage1 = 16221
    WhiteMantleBattleMage2 = 16226
    ExquisiteConjunction = 16232
    # Mursaat Overseer
    Jade = 17181
    # Samarog
    Guldhem = 17208
    Rigom = 17124
    # Deimos
    Saul = 17126
    Thief = 17206
    Gambler = 17335
    GamblerClones = 17161
    GamblerReal = 17355
    Drunkard = 17163
    Oil = 17332
    Tear = 17303
    Greed = 17213
    Pride = 17233
    Hands = 17221
    # Soulless Horror
    TormentedDead = 19422
    SurgingSoul = 19474
    Scythe = 19396
    FleshWurm = 19464
    # River
    Enervator = 19863
    HollowedBomber = 19399
    RiverOfSouls = 19829
    SpiritHorde1 = 19461
    SpiritHorde2 = 19400
    SpiritHorde3 = 19692
    # Statues of Darkness
    LightThieves = 19658
    MazeMinotaur = 19402
    # Statue of Death
    OrbSpider = 19801
    GreenSpirit1 = 19587
    GreenSpirit2 = 19571
    # Dhuum
    Messenger = 19807
    Echo = 19628
    Enforcer = 19681
    Deathling = 19759
    UnderworldReaper = 19831
    DhuumDesmina = 19481
    # Conjured Amalgamate
    ConjuredGreatsword = 21255
    ConjuredShield = 21170
    # Qadim
    LavaElemental1 = 21236
    LavaElemental2 = 21078
    IcebornHydra = 21163
    GreaterMagmaElemental1 = 21150
    GreaterMagmaElemental2 = 21223
    FireElemental = 21221
    FireImp = 21100
    PyreGuardian = 21050
    ReaperofFlesh = 21218
    DestroyerTroll = 20944
    IceElemental = 21049
    AncientInvokedHydra = 21285
    ApocalypseBringer = 21073
    WyvernMatriarch = 20997
    WyvernPatriarch = 21183
    Zommoros = 20961
    # Sabir
    ParalyzingWisp = 21955
    VoltaicWisp = 21975
    SmallJumpyTornado = 21961
    SmallKillerTornado = 21957
    BigKillerTornado = 21987
    # Peerless Qadim
    Pylon1 = 21996
    Pylon2 = 21962
    EntropicDistortion = 21973
    EnergyOrb = 21946
    # Fraenir
    IcebroodElemental = 22576
    # Boneskinner
    PrioryExplorer = 22561
    PrioryScholar = 22448
    VigilRecruit = 22389
    VigilTactician = 22420
    AberrantWisp = 22538
    # Whisper of Jormag
    WhisperEcho = 22628
    # Cold War
    PropagandaBallon = 23093
    DominionBladestorm = 23102
    DominionStalker = 22882
    DominionSpy1 = 22833
    DominionSpy2 = 22856
    DominionAxeFiend = 22938
    DominionEffigy = 22897
    FrostLegionCrusher = 23005
    FrostLegionMusketeer = 22870
    BloodLegionBlademaster = 22993
    CharrTank = 22953
    SonsOfSvanirHighShaman = 22283
    DoppelgangerNecro = 22713
    DoppelgangerWarrior = 22640
    DoppelgangerGuardian1 = 22635
    DoppelgangerGuardian2 = 22608
    DoppelgangerThief1 = 22656
    DoppelgangerThief2 = 22612
    DoppelgangerRevenant = 22610
    # Aetherblade Hideout
    MaiTrinStrikeDuringEcho = 23826
    ScarletPhantom1 = 24404
    ScarletPhantomBreakbar = 23656
    ScarletPhantomHP = 24431
    ScarletPhantomHP2 = 25262
    ScarletPhantom2 = 24396
    # Xunlai Jade Junkyard
    Ankka = 24634
    AnkkaHallucination1 = 24258
    AnkkaHallucination2 = 24158
    AnkkaHallucination3 = 24969
    ReanimatedSpite = 24348
    ReanimatedMalice1 = 24976
    ReanimatedMalice2 = 24171
    ZhaitansReach = 23839
    ReanimatedHatred = 23673
    # Kaineng Overlook
    TheSniper = 23612
    TheSniperCM = 25259
    TheMechRider = 24660
    TheMechRiderCM = 25271
    TheEnforcer = 24261
    TheEnforcerCM = 25236
    TheRitualist = 23618
    TheRitualistCM = 25242
    TheMindblade = 24254
    TheMindbladeCM = 25280
    SpiritOfPain = 23793
    SpiritOfDestruction = 23961
    # Void Amalgamate
    VoidAmalgamate = 24375
    KillableVoidAmalgamate = 23956
    VoidTangler = 25138
    VoidColdsteel = 23945
    VoidAbomination = 23936
    VoidSaltsprayDragon = 23846
    VoidObliterator = 23995
    VoidRotswarmer = 24590
    VoidGiant = 24450
    VoidSkullpiercer = 25177
    VoidTimeCaster = 25025
    VoidBrandbomber = 24783
    VoidBurster = 24464
    VoidWarforged1 = 24129
    VoidWarforged2 = 24855
    VoidStormseer = 24677
    VoidMelter = 24223
    VoidGoliath = 24761
    # Freezie
    FreeziesFrozenHeart = 21328
    # Fractals
    FractalVindicator = 19684
    FractalAvenger = 15960
    # MAMA
    GreenKnight = 16906
    RedKnight = 16974
    BlueKnight = 16899
    TwistedHorror = 17009
    # Siax
    SiaxHallucination = 17002
    EchoOfTheUnclean = 17068
    NightmareHallucinationSiax = 16911
    # Ensolyss
    NightmareHallucination1 = 16912
    NightmareHallucination2 = 17033
    # Skorvald
    FluxAnomaly4 = 17673
    FluxAnomaly3 = 17851
    FluxAnomaly2 = 17770
    FluxAnomaly1 = 17599
    SolarBloom = 17732
    # Artsariiv
    TemporalAnomaly = 17870
    Spark = 17630
    SmallArtsariiv = 17811
    MediumArtsariiv = 17694
    BigArtsariiv = 17937
    # Arkk
    TemporalAnomaly2 = 17720
    Archdiviner = 17893
    Fanatic = 11282
    BrazenGladiator = 17730
    BLIGHT = 16437
    PLINK = 16325
    DOC = 16657
    CHOP = 16552
    ProjectionArkk = 17613
    # Ai
    EnrageWaterSprite = 23270
    SorrowDemon1 = 23265
    SorrowDemon2 = 23242
    SorrowDemon3 = 23279
    SorrowDemon4 = 23245
    SorrowDemon5 = 23256
    DoubtDemon = 23268
    FearDemon = 23264
    GuiltDemon = 23252
    # Open world Soo-Won
    SooWonTail = 51756
    VoidGiant2 = 24310
    VoidTimeCaster2 = 24586
    VoidBrandstalker = 24951
    VoidColdsteel2 = 23791
    VoidObliterator2 = 24947
    VoidAbomination2 = 23886
    VoidBomber = 24714
    VoidBrandbeast = 23917
    VoidBrandcharger1 = 24936
    VoidBrandcharger2 = 24039
    VoidBrandfang1 = 24912
    VoidBrandfang2 = 24772
    VoidBrandscale1 = 24053
    VoidBrandscale2 = 24426
    VoidColdsteel3 = 24063
    VoidCorpseknitter1 = 24756
    VoidCorpseknitter2 = 24607
    VoidDespoiler1 = 23874
    VoidDespoiler2 = 25179
    VoidFiend1 = 23707
    VoidFiend2 = 24737
    VoidFoulmaw = 24766
    VoidFrostwing = 24780
    VoidGlacier1 = 23753
    VoidGlacier2 = 24235
    VoidInfested1 = 24390
    VoidInfested2 = 24997
    VoidMelter1 = 24497
    VoidMelter2 = 24807
    VoidRimewolf1 = 24698
    VoidRimewolf2 = 23798
    VoidRotspinner1 = 25057
    VoidStorm = 24007
    VoidStormseer2 = 24419
    VoidStormseer3 = 23962
    VoidTangler2 = 23567
    VoidThornheart1 = 24406
    VoidThornheart2 = 23688
    VoidWorm = 23701